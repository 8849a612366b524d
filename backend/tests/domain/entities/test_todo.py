"""Unit tests for Todo entity."""

import pytest
from domain.entities import Todo
from domain.enums import TodoStatus
from domain.value_objects import TodoBody, TodoId, TodoTitle, UserId

from conftest import CREATED_AT, UPDATED_AT


class TestTodoCreation:
    """Test Todo.create()."""

    def test_create_without_body(self, user_id):
        """Test a new todo starts NOT_STARTED with an empty body."""
        todo = Todo.create(user_id, TodoTitle.from_value("Buy milk"))
        assert isinstance(todo.id, TodoId)
        assert todo.user_id == user_id
        assert todo.title.value == "Buy milk"
        assert todo.body.is_empty()
        assert todo.status == TodoStatus.NOT_STARTED
        assert todo.created_at == todo.updated_at
        assert todo.created_at.tzinfo is not None

    def test_create_with_body(self, user_id):
        body = TodoBody.from_value("Two bottles")
        todo = Todo.create(user_id, TodoTitle.from_value("Buy milk"), body)
        assert todo.body == body

    def test_each_create_assigns_fresh_id(self, user_id):
        title = TodoTitle.from_value("Buy milk")
        assert Todo.create(user_id, title) != Todo.create(user_id, title)


class TestTodoReconstruction:
    """Test Todo.reconstruct()."""

    def test_reconstruct_keeps_every_field(self, stored_todo, user_id):
        """Test reconstruct returns every stored value without transformation."""
        assert stored_todo.id.value == "018e8c6a-4e5f-7b9d-8c2a-3f1e4d5c6b7a"
        assert stored_todo.user_id == user_id
        assert stored_todo.title.value == "Write report"
        assert stored_todo.body.value == "Quarterly numbers"
        assert stored_todo.status == TodoStatus.IN_PROGRESS
        assert stored_todo.created_at == CREATED_AT
        assert stored_todo.updated_at == UPDATED_AT


class TestTodoChanges:
    """Test change_* methods."""

    def test_change_title_returns_new_todo(self, stored_todo):
        title = TodoTitle.from_value("Write summary")
        changed = stored_todo.change_title(title)
        assert changed is not stored_todo
        assert changed.title == title
        assert changed.id == stored_todo.id
        assert changed.created_at == stored_todo.created_at
        assert changed.updated_at >= stored_todo.updated_at
        assert changed.body == stored_todo.body
        assert changed.status == stored_todo.status

    def test_change_title_leaves_original_untouched(self, stored_todo):
        stored_todo.change_title(TodoTitle.from_value("Write summary"))
        assert stored_todo.title.value == "Write report"
        assert stored_todo.updated_at == UPDATED_AT

    def test_change_title_twice_gives_equal_results(self, stored_todo):
        """Test repeating the same change yields equal todos with equal fields."""
        title = TodoTitle.from_value("Write summary")
        first = stored_todo.change_title(title)
        second = stored_todo.change_title(title)
        assert first == second
        assert first.title == second.title
        assert first.body == second.body
        assert first.status == second.status
        assert first.created_at == second.created_at

    def test_change_body(self, stored_todo):
        changed = stored_todo.change_body(TodoBody.from_value("Annual numbers"))
        assert changed.body.value == "Annual numbers"
        assert stored_todo.body.value == "Quarterly numbers"

    def test_change_body_to_empty(self, stored_todo):
        changed = stored_todo.change_body(TodoBody.empty())
        assert changed.body.is_empty()

    def test_change_status_leaves_original_untouched(self, stored_todo):
        changed = stored_todo.change_status(TodoStatus.COMPLETED)
        assert changed.status == TodoStatus.COMPLETED
        assert stored_todo.status == TodoStatus.IN_PROGRESS

    @pytest.mark.parametrize("status", list(TodoStatus))
    def test_any_status_transition_is_allowed(self, stored_todo, status):
        assert stored_todo.change_status(status).status == status

    def test_updated_at_never_goes_backwards(self, user_id):
        """Test a change keeps updated_at when the stored value lies in the future."""
        future = UPDATED_AT.replace(year=2999)
        todo = Todo.reconstruct(
            TodoId.generate(), user_id, TodoTitle.from_value("x"), TodoBody.empty(),
            TodoStatus.PENDING, CREATED_AT, future,
        )
        assert todo.change_status(TodoStatus.COMPLETED).updated_at == future

    def test_immutability(self, stored_todo):
        with pytest.raises(Exception):  # FrozenInstanceError
            stored_todo.status = TodoStatus.COMPLETED


class TestTodoEquality:
    """Test identity-based equality."""

    def test_same_id_with_different_fields_is_equal(self, stored_todo):
        other = Todo.reconstruct(
            stored_todo.id,
            UserId.generate(),
            TodoTitle.from_value("Something else"),
            TodoBody.empty(),
            TodoStatus.COMPLETED,
            CREATED_AT,
            CREATED_AT,
        )
        assert stored_todo == other
        assert hash(stored_todo) == hash(other)

    def test_different_id_with_same_fields_is_not_equal(self, stored_todo):
        other = Todo.reconstruct(
            TodoId.generate(),
            stored_todo.user_id,
            stored_todo.title,
            stored_todo.body,
            stored_todo.status,
            stored_todo.created_at,
            stored_todo.updated_at,
        )
        assert stored_todo != other
