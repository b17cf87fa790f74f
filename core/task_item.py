from dataclasses import dataclass


@dataclass
class TaskItem:
    text: str
    done: bool = False

    def toggle(self) -> None:
        self.done = not self.done

    def copy(self) -> "TaskItem":
        return TaskItem(self.text, self.done)

    def checklist_line(self) -> str:
        return f"- [{'x' if self.done else ' '}] {self.text}"
