import pytest

from clikit.action import Action
from clikit.types import NumberType


class FakeReader:
    """Line reader answering prompts from a list. Exception classes in the list are raised."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.prompts = []

    def read_line(self, prompt, masked=False):
        self.prompts.append((prompt, masked))
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if isinstance(answer, type) and issubclass(answer, BaseException):
            raise answer
        return answer


class FakeReporter:
    def __init__(self):
        self.messages = []

    def report(self, message):
        self.messages.append(message)


@pytest.fixture
def reader():
    return FakeReader()


@pytest.fixture
def reporter():
    return FakeReporter()


@pytest.fixture
def say_action():
    say = Action("say", "Say hello.")
    say.option("name", "n", default="John Doe")
    say.option("age", "a", type=NumberType(), default=18)
    return say


@pytest.fixture
def make_reader():
    return FakeReader
