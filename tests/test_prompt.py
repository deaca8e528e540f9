import pytest

from ocs01_setup.utils.prompt import Prompter


def answering(answer):
    return Prompter(input_func=lambda question: answer)


@pytest.mark.parametrize("answer", ["", "y", "Y", "yes", "whatever"])
def test_default_yes_accepts_everything_but_no(answer):
    assert answering(answer).confirm("Proceed?", default=True) is True


@pytest.mark.parametrize("answer", ["n", "N", "no", " No "])
def test_default_yes_declines_on_no(answer):
    assert answering(answer).confirm("Proceed?", default=True) is False


@pytest.mark.parametrize("answer", ["", "n", "maybe", "yess"])
def test_default_no_declines_unless_yes(answer):
    assert answering(answer).confirm("Proceed?", default=False) is False


@pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES"])
def test_default_no_accepts_yes(answer):
    assert answering(answer).confirm("Proceed?", default=False) is True


def test_end_of_input_falls_back_to_default():
    def closed(question):
        raise EOFError

    prompter = Prompter(input_func=closed, secret_func=closed)
    assert prompter.confirm("Proceed?", default=True) is True
    assert prompter.confirm("Proceed?", default=False) is False
    assert prompter.text("Wallet Address") == ""
    assert prompter.secret("Private Key") == ""


def test_secret_uses_secret_reader():
    asked = []

    def secret_reader(question):
        asked.append(question)
        return "s3cret"

    prompter = Prompter(input_func=lambda q: "visible", secret_func=secret_reader)
    assert prompter.secret("Private Key") == "s3cret"
    assert "Private Key" in asked[0]


def test_text_is_returned_verbatim():
    assert answering("  oct with spaces  ").text("Wallet Address") == "  oct with spaces  "


@pytest.mark.parametrize(
    "answer, default, expected",
    [
        ("y", False, True),
        ("yes", False, True),
        ("ye", False, False),
        ("yep", False, False),
        ("1", False, False),
        ("n", True, False),
        ("no", True, False),
        ("nope", True, True),
        ("0", True, True),
    ],
)
def test_accepted_answer_set(answer, default, expected):
    assert answering(answer).confirm("Proceed?", default=default) is expected
