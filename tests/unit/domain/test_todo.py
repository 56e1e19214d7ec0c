from uuid import UUID

from todo_api.domain.entities import Todo


class TestTodoCreation:
    def test_create_todo_with_valid_data(self):
        todo = Todo.create(name="Write report", description="Quarterly numbers")

        assert todo.id
        assert todo.name == "Write report"
        assert todo.description == "Quarterly numbers"
        assert todo.status is False

    def test_create_generates_uuid4_id(self):
        todo = Todo.create(name="a", description="b")

        assert UUID(todo.id).version == 4

    def test_create_generates_distinct_ids(self):
        ids = {Todo.create(name="a", description="b").id for _ in range(200)}

        assert len(ids) == 200


class TestTodoItemMapping:
    def test_to_item(self):
        todo = Todo(id="todo-1", name="a", description="b", status=True)

        assert todo.to_item() == {
            "id": "todo-1",
            "name": "a",
            "description": "b",
            "status": True,
        }

    def test_from_item_ignores_unknown_attributes(self):
        todo = Todo.from_item(
            {"id": "todo-1", "name": "a", "description": "b", "status": True, "ttl": 123}
        )

        assert todo == Todo(id="todo-1", name="a", description="b", status=True)

    def test_from_item_defaults_missing_status_to_false(self):
        todo = Todo.from_item({"id": "todo-1", "name": "a", "description": "b"})

        assert todo.status is False
