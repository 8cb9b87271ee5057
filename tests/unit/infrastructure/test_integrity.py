"""
Tests pour la classification des IntegrityError.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from catalog.core.ports.repositories import ViolatedConstraint
from catalog.infrastructure.persistence.integrity import constraint_error


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


@pytest.mark.parametrize(
    "message, expected",
    [
        ("FOREIGN KEY constraint failed", ViolatedConstraint.FOREIGN_KEY),
        ('insert violates foreign key constraint "fk_role"', ViolatedConstraint.FOREIGN_KEY),
        ("UNIQUE constraint failed: users.email", ViolatedConstraint.UNIQUE),
        ('duplicate key value violates unique constraint "users_email_key"', ViolatedConstraint.UNIQUE),
    ],
)
def test_constraint_is_classified(message, expected):
    signal = constraint_error(_integrity_error(message))

    assert signal.constraint is expected
    assert signal.detail == message


def test_other_constraints_are_not_classified():
    assert constraint_error(_integrity_error("NOT NULL constraint failed: products.name")) is None
