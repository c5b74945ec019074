import dataclasses

import pytest

from sql2enums.sql_models import EnumDeclaration, ScannerContext, ScannerState


def test_enum_declaration_is_immutable():
    declaration = EnumDeclaration("Status", ("Active",))

    with pytest.raises(dataclasses.FrozenInstanceError):
        declaration.type_name = "Other"


def test_literals_fall_back_to_values():
    assert EnumDeclaration("Status", ("Active",)).literals() == ["Active"]
    assert EnumDeclaration("Status", ("Active",), "status", ("active",)).literals() == ["active"]


def test_context_reset_clears_statement():
    ctx = ScannerContext(state=ScannerState.IN_STATEMENT, buffer=list("CREATE"), capturing=False, quote_char="'")

    ctx.reset()

    assert ctx.state is ScannerState.IDLE
    assert ctx.buffer == []
    assert ctx.capturing is True
    assert ctx.quote_char is None
    assert ctx.text() == ""
