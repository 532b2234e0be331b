"""A log of the actions taken during a session."""

from __future__ import annotations

from typing import Iterator

MESSAGE_LIMIT = 199


class History:
    """Action messages kept newest first."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def add(self, message: str) -> None:
        """Record a message at the head of the history, cut to the size limit."""
        self._messages.insert(0, message[:MESSAGE_LIMIT])

    def render(self) -> str:
        """Return the printable history."""
        lines = ["", "--- HISTÓRICO DE AÇÕES ---"]
        if not self._messages:
            lines.append("Nenhuma ação registrada.")
            return "\n".join(lines) + "\n"
        lines += [f"- {message}" for message in self._messages]
        lines.append("--------------------------")
        return "\n".join(lines) + "\n"