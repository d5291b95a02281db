"""
Tests for TaskService command workflows (add, list, edit, done).
"""

import pytest

from todo.core.editor import EditorBridge, EditorError
from todo.core.tasks.models import Task
from todo.core.tasks.service import EditOutcome, TaskService
from todo.core.tasks.store import TaskNotFoundError, TaskStore


@pytest.fixture
def service(abc_store: TaskStore, fake_editor) -> TaskService:
    return TaskService(abc_store, EditorBridge("vim"))


@pytest.fixture
def empty_service(fake_editor) -> TaskService:
    return TaskService(TaskStore(), EditorBridge("vim"))


class TestAdd:
    def test_add_to_empty_store(self, empty_service: TaskService) -> None:
        assert empty_service.add("Buy groceries", "") == 1
        assert empty_service.list_tasks() == [(1, Task(head="Buy groceries"))]

    def test_add_with_body(self, empty_service: TaskService) -> None:
        empty_service.add("Call Sam", "about the lease")
        assert empty_service.store.get(1) == Task(head="Call Sam", body="about the lease")

    def test_add_appends(self, service: TaskService) -> None:
        assert service.add("D") == 4

    def test_add_does_not_run_editor(self, empty_service: TaskService, fake_editor) -> None:
        empty_service.add("x")
        assert fake_editor.commands == []

    def test_arguments_normalized_like_editor_text(self, empty_service: TaskService) -> None:
        empty_service.add("Buy milk  ", "\n\n2 litres  \n\n")
        assert empty_service.store.get(1) == Task(head="Buy milk", body="2 litres")

    def test_blank_head_promotes_body(self, empty_service: TaskService) -> None:
        empty_service.add("", "call the bank")
        assert empty_service.store.get(1) == Task(head="call the bank")

    def test_blank_head_and_body_rejected(self, empty_service: TaskService) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            empty_service.add("   ", None)
        assert len(empty_service.store) == 0


class TestAddInteractive:
    def test_seeded_with_empty_text(self, empty_service: TaskService, fake_editor) -> None:
        fake_editor.response = "New task\n"
        empty_service.add_interactive()
        assert fake_editor.seeds == [""]

    def test_creates_task(self, empty_service: TaskService, fake_editor) -> None:
        fake_editor.response = "Write report\nsection 2\nsection 3\n"
        assert empty_service.add_interactive() == 1
        assert empty_service.store.get(1) == Task(
            head="Write report", body="section 2\nsection 3"
        )

    def test_empty_output_aborts(self, service: TaskService, fake_editor) -> None:
        fake_editor.response = ""
        assert service.add_interactive() is None
        assert service.store.ids() == [1, 2, 3]

    def test_whitespace_only_output_aborts(self, empty_service: TaskService, fake_editor) -> None:
        fake_editor.response = "   \n\t\n\n"
        assert empty_service.add_interactive() is None
        assert len(empty_service.store) == 0

    def test_editor_failure_propagates(self, service: TaskService, fake_editor) -> None:
        fake_editor.returncode = 2
        with pytest.raises(EditorError):
            service.add_interactive()
        assert len(service.store) == 3


class TestList:
    def test_ordered(self, service: TaskService) -> None:
        assert [(i, t.head) for i, t in service.list_tasks()] == [(1, "A"), (2, "B"), (3, "C")]

    def test_empty(self, empty_service: TaskService) -> None:
        assert empty_service.list_tasks() == []


class TestEdit:
    def test_seeded_with_current_text(self, service: TaskService, fake_editor) -> None:
        service.store.replace(2, Task(head="B", body="details"))
        service.edit(2)
        assert fake_editor.seeds == ["B\ndetails\n"]

    def test_update(self, service: TaskService, fake_editor) -> None:
        fake_editor.response = "B prime\nnew body\n"
        result = service.edit(2)

        assert result.outcome == EditOutcome.UPDATED
        assert result.task == Task(head="B prime", body="new body")
        assert service.store.items() == [
            (1, Task(head="A")),
            (2, Task(head="B prime", body="new body")),
            (3, Task(head="C")),
        ]

    def test_unchanged_is_noop(self, service: TaskService, fake_editor) -> None:
        before = service.store.items()
        result = service.edit(2)

        assert result.outcome == EditOutcome.UNCHANGED
        assert service.store.items() == before

    @pytest.mark.parametrize(
        ("head", "body"),
        [("", "call the bank"), ("Buy milk ", None), ("  indented", "\nbody  \n")],
    )
    def test_unchanged_edit_of_direct_add_is_noop(
        self, empty_service: TaskService, fake_editor, head: str, body: str | None
    ) -> None:
        empty_service.add(head, body)
        before = empty_service.store.items()

        result = empty_service.edit(1)

        assert result.outcome == EditOutcome.UNCHANGED
        assert empty_service.store.items() == before

    def test_whitespace_only_change_is_noop(self, service: TaskService, fake_editor) -> None:
        fake_editor.response = "\nB   \n\n"
        assert service.edit(2).outcome == EditOutcome.UNCHANGED

    def test_empty_deletes_and_reindexes(self, fake_editor) -> None:
        store = TaskStore()
        store.add(Task(head="first"))
        store.add(Task(head="second"))
        service = TaskService(store, EditorBridge("vim"))
        fake_editor.response = ""

        result = service.edit(2)

        assert result.outcome == EditOutcome.DELETED
        assert store.items() == [(1, Task(head="first"))]

    def test_empty_first_task_shifts_rest(self, service: TaskService, fake_editor) -> None:
        fake_editor.response = "  \n"
        service.edit(1)
        assert service.store.items() == [(1, Task(head="B")), (2, Task(head="C"))]

    def test_missing_task(self, service: TaskService, fake_editor) -> None:
        with pytest.raises(TaskNotFoundError):
            service.edit(9)
        assert fake_editor.commands == []

    def test_editor_failure_leaves_task(self, service: TaskService, fake_editor) -> None:
        fake_editor.response = ""
        fake_editor.returncode = 1
        with pytest.raises(EditorError):
            service.edit(2)
        assert service.store.get(2) == Task(head="B")


class TestDone:
    def test_batch(self, service: TaskService) -> None:
        result = service.done([1, 3])
        assert result.removed == [1, 3]
        assert result.missing == []
        assert service.store.items() == [(1, Task(head="B"))]

    def test_missing_ids_skipped(self, service: TaskService) -> None:
        result = service.done([7, 2, 0])
        assert result.removed == [2]
        assert result.missing == [7, 0]
        assert result.changed
        assert service.store.items() == [(1, Task(head="A")), (2, Task(head="C"))]

    def test_all_missing(self, service: TaskService) -> None:
        result = service.done([5])
        assert not result.changed
        assert service.store.ids() == [1, 2, 3]

    def test_duplicates_collapsed(self, service: TaskService) -> None:
        result = service.done([2, 2])
        assert result.removed == [2]
        assert result.missing == []
        assert service.store.ids() == [1, 2]
