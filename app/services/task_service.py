"""Task service: persistence operations over Task records."""
from sqlmodel import Session, select
from typing import Any, Dict, List, Optional

from app.models.task import Task, utcnow
from app.utils.logger import get_logger

logger = get_logger(__name__)

MUTABLE_FIELDS = ("title", "description", "status")


class TaskService:
    """Service class for task CRUD operations."""

    def __init__(self, session: Session):
        self.session = session

    def insert(self, fields: Dict[str, Any]) -> Task:
        """Create a new task from validated fields."""
        now = utcnow()
        task = Task(
            **{key: value for key, value in fields.items() if key in MUTABLE_FIELDS},
            created_at=now,
            updated_at=now,
        )

        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        logger.info("Task created", task_id=task.id, status=task.status)
        return task

    def find(self, task_id: int) -> Optional[Task]:
        """Get a specific task by ID."""
        return self.session.get(Task, task_id)

    def update(self, task_id: int, fields: Dict[str, Any]) -> Optional[Task]:
        """Apply the supplied fields to a task; fields not supplied keep their value."""
        task = self.find(task_id)
        if not task:
            return None

        for key, value in fields.items():
            if key in MUTABLE_FIELDS:
                setattr(task, key, value)

        task.updated_at = utcnow()
        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        logger.info("Task updated", task_id=task.id, fields=sorted(fields))
        return task

    def delete(self, task_id: int) -> bool:
        """Delete a task. Returns False when it does not exist."""
        task = self.find(task_id)
        if not task:
            return False

        self.session.delete(task)
        self.session.commit()
        logger.info("Task deleted", task_id=task_id)
        return True

    def list_all(self) -> List[Task]:
        """Get every task, most recently created first."""
        # Equal timestamps fall back to insertion order, newest first
        statement = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
        return list(self.session.exec(statement).all())
