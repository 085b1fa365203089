from __future__ import annotations

import pytest

from lib_gh_commands.domain.errors import (
    CommandError,
    DuplicateParameterError,
    InputRequiredError,
    InvalidArgumentError,
    require_text,
)


def test_error_kinds_share_a_base_and_builtin_categories() -> None:
    assert issubclass(InvalidArgumentError, CommandError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(InputRequiredError, LookupError)
    assert issubclass(DuplicateParameterError, ValueError)


def test_input_required_error_names_the_input() -> None:
    error = InputRequiredError("token")
    assert error.name == "token"
    assert str(error) == "Input required and not supplied: token"


@pytest.mark.parametrize("value", [None, ""])
def test_require_text_rejects_empty(value: str | None) -> None:
    with pytest.raises(InvalidArgumentError, match="name must not be empty") as excinfo:
        require_text("name", value)
    assert excinfo.value.argument == "name"


def test_require_text_returns_value() -> None:
    assert require_text("name", " x ") == " x "
