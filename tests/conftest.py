import pytest

from minipy.interpreter import Interpreter


class Session:
    """An Interpreter whose printed lines and diagnostics are captured."""

    def __init__(self):
        self.lines: list[str] = []
        self.interp = Interpreter(output=self.lines.append, max_command_length=0)

    def run(self, *commands: str) -> list[str]:
        """Execute commands in order and return only what they printed."""
        self.lines.clear()
        for command in commands:
            self.interp.execute(command)
        return list(self.lines)

    def show(self, name: str) -> str:
        out = self.run(f"print({name})")
        assert len(out) == 1
        return out[0]

    @property
    def kinds(self) -> list[str]:
        return [d.kind for d in self.interp.diagnostics]

    @property
    def variables(self):
        return self.interp.variables


@pytest.fixture
def session():
    """Fresh session per test."""
    s = Session()
    yield s
    s.interp.close()
