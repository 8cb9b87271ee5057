"""
Tests pour AccountService - comptes utilisateurs et resolution d'identite.

Tests couvrant:
- Creation : hachage du mot de passe, roles resolus par id, e-mail unique
- Mise a jour : empreinte conservee, roles remplaces, conflit d'e-mail
- Suppression et lecture (NotFound)
- resolve_identity / authenticate (IdentityUnknownError)
"""

import pytest
from loguru import logger

from catalog.core.entities import User
from catalog.core.exceptions import (
    ConflictError,
    IdentityUnknownError,
    NotFoundError,
    UnresolvedReferenceError,
)
from catalog.core.ports.repositories import StoreConstraintError, ViolatedConstraint
from catalog.core.value_objects import Page, PageRequest
from catalog.services.account_service import AccountService
from catalog.services.dto import RoleView, UserInsertView, UserUpdateView

EXISTING_ID = 1
NON_EXISTING_ID = 1000
DEPENDENT_ID = 4


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def account_service(mock_user_repo, mock_role_repo, mock_hasher):
    """AccountService branche sur les mocks."""
    return AccountService(users=mock_user_repo, roles=mock_role_repo, hasher=mock_hasher)


@pytest.fixture
def insert_view():
    return UserInsertView(
        first_name="Ana",
        last_name="Green",
        email="Ana@Example.com",
        password="secret1",
        roles=[RoleView(id=1), RoleView(id=2)],
    )


@pytest.fixture
def update_view():
    return UserUpdateView(
        first_name="Alexander",
        last_name="Brown",
        email="alex@gmail.com",
        roles=[RoleView(id=2)],
    )


@pytest.fixture
def security_events():
    """Capture les evenements de securite emis pendant le test."""
    records = []
    sink_id = logger.add(
        lambda message: records.append(message.record),
        level="DEBUG",
        filter=lambda record: record["extra"].get("security") is True,
    )
    yield records
    logger.remove(sink_id)


# ============================================================================
# Creation
# ============================================================================


class TestCreateUser:
    """Tests pour create_user."""

    def test_create_user_stores_hash_only(
        self, account_service, mock_user_repo, mock_hasher, insert_view
    ):
        """Le clair est confie au hacheur ; seule l'empreinte est sauvegardee."""
        created = account_service.create_user(insert_view)

        mock_hasher.hash.assert_called_once_with("secret1")
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.password_hash == "hashed:secret1"
        assert created.id == 2
        assert not hasattr(created, "password")

    def test_create_user_normalizes_email(self, account_service, mock_user_repo, insert_view):
        """L'e-mail est stocke en minuscules."""
        account_service.create_user(insert_view)

        assert mock_user_repo.save.call_args.args[0].email == "ana@example.com"

    def test_create_user_resolves_roles(self, account_service, insert_view):
        created = account_service.create_user(insert_view)

        assert [r.authority for r in created.roles] == ["ROLE_OPERATOR", "ROLE_ADMIN"]

    def test_create_user_unknown_role_saves_nothing(
        self, account_service, mock_user_repo, mock_hasher, insert_view
    ):
        """Un role inexistant leve UnresolvedReferenceError avant tout hachage."""
        view = insert_view.model_copy(update={"roles": [RoleView(id=9)]})

        with pytest.raises(UnresolvedReferenceError):
            account_service.create_user(view)

        mock_hasher.hash.assert_not_called()
        mock_user_repo.save.assert_not_called()

    def test_create_user_duplicate_email_raises_conflict(
        self, account_service, mock_user_repo, insert_view
    ):
        """Un e-mail deja utilise leve ConflictError."""
        view = insert_view.model_copy(update={"email": "ALEX@gmail.com"})

        with pytest.raises(ConflictError):
            account_service.create_user(view)

        mock_user_repo.save.assert_not_called()

    def test_create_user_email_taken_before_save_raises_conflict(
        self, account_service, mock_user_repo, insert_view
    ):
        """Un e-mail pris entre la verification et l'ecriture leve ConflictError."""
        mock_user_repo.save.side_effect = StoreConstraintError(
            ViolatedConstraint.UNIQUE, "UNIQUE constraint failed: users.email"
        )

        with pytest.raises(ConflictError) as exc_info:
            account_service.create_user(insert_view)

        assert exc_info.value.entity == "User"
        assert exc_info.value.identifier == "ana@example.com"

    def test_create_user_role_removed_before_save_is_unresolved(
        self, account_service, mock_user_repo, insert_view
    ):
        mock_user_repo.save.side_effect = StoreConstraintError(ViolatedConstraint.FOREIGN_KEY)

        with pytest.raises(UnresolvedReferenceError) as exc_info:
            account_service.create_user(insert_view)

        assert exc_info.value.identifier == [1, 2]


# ============================================================================
# Mise a jour
# ============================================================================


class TestUpdateUser:
    """Tests pour update_user."""

    def test_update_user_keeps_password_hash(self, account_service, mock_user_repo, update_view):
        """La mise a jour ne touche pas a l'empreinte du mot de passe."""
        account_service.update_user(EXISTING_ID, update_view)

        saved = mock_user_repo.save.call_args.args[0]
        assert saved.password_hash == "hashed:123456"
        assert saved.first_name == "Alexander"

    def test_update_user_replaces_roles(self, account_service, update_view):
        """Les roles sont entierement remplaces par ceux de la vue."""
        updated = account_service.update_user(EXISTING_ID, update_view)

        assert [r.authority for r in updated.roles] == ["ROLE_ADMIN"]

    def test_update_user_own_email_is_allowed(self, account_service, mock_user_repo, update_view):
        """Conserver son propre e-mail n'est pas un conflit."""
        account_service.update_user(EXISTING_ID, update_view)

        mock_user_repo.save.assert_called_once()

    def test_update_user_email_of_other_user_raises_conflict(
        self, account_service, mock_user_repo, update_view
    ):
        """Prendre l'e-mail d'un autre utilisateur leve ConflictError."""
        other = User(id=7, first_name="Bob", email="bob@gmail.com")
        mock_user_repo.get_by_id.side_effect = lambda user_id: other if user_id == 7 else None

        with pytest.raises(ConflictError):
            account_service.update_user(7, update_view)

        mock_user_repo.save.assert_not_called()

    def test_update_user_unknown_id_raises_not_found(self, account_service, update_view):
        with pytest.raises(NotFoundError):
            account_service.update_user(NON_EXISTING_ID, update_view)


# ============================================================================
# Lecture et suppression
# ============================================================================


class TestReadAndDelete:
    """Tests pour get_user, find_by_email, list_users, delete_user, list_roles."""

    def test_get_user_never_exposes_hash(self, account_service):
        view = account_service.get_user(EXISTING_ID)

        assert view.email == "alex@gmail.com"
        assert "password" not in view.model_dump()
        assert "hashed" not in view.model_dump_json()

    def test_get_user_unknown_raises_not_found(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.get_user(NON_EXISTING_ID)

    def test_find_by_email_is_case_insensitive(self, account_service):
        view = account_service.find_by_email("  ALEX@Gmail.com")

        assert view.id == EXISTING_ID

    def test_list_users_maps_page(self, account_service, mock_user_repo, alex):
        mock_user_repo.find_page.return_value = Page(items=(alex,), page=0, size=12, total=1)

        result = account_service.list_users(PageRequest())

        assert [v.first_name for v in result.items] == ["Alex"]
        assert result.total == 1

    def test_delete_user_outcomes(self, account_service):
        """DELETED passe, NOT_FOUND et CONSTRAINT_VIOLATION sont traduits."""
        account_service.delete_user(EXISTING_ID)
        with pytest.raises(NotFoundError):
            account_service.delete_user(NON_EXISTING_ID)
        with pytest.raises(ConflictError):
            account_service.delete_user(DEPENDENT_ID)

    def test_list_roles(self, account_service):
        assert [r.authority for r in account_service.list_roles()] == [
            "ROLE_OPERATOR",
            "ROLE_ADMIN",
        ]


# ============================================================================
# Identite
# ============================================================================


class TestIdentity:
    """Tests pour resolve_identity et authenticate."""

    def test_resolve_identity_returns_credentials(self, account_service):
        """L'identite resolue porte l'empreinte et les autorites."""
        credentials = account_service.resolve_identity("alex@gmail.com")

        assert credentials.id == EXISTING_ID
        assert credentials.username == "alex@gmail.com"
        assert credentials.password_hash == "hashed:123456"
        assert credentials.authorities == ("ROLE_OPERATOR",)
        assert "hashed" not in repr(credentials)

    def test_resolve_identity_unknown_login(self, account_service):
        """Un identifiant inconnu leve IdentityUnknownError, pas NotFoundError."""
        with pytest.raises(IdentityUnknownError) as exc_info:
            account_service.resolve_identity("nobody@gmail.com")

        assert not isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.login == "nobody@gmail.com"

    def test_authenticate_valid_password(self, account_service, mock_hasher):
        credentials = account_service.authenticate("alex@gmail.com", "123456")

        mock_hasher.verify.assert_called_once_with("123456", "hashed:123456")
        assert credentials.id == EXISTING_ID

    def test_authenticate_bad_password_is_unknown_identity(self, account_service):
        """Un mauvais mot de passe est indiscernable d'un identifiant inconnu."""
        with pytest.raises(IdentityUnknownError) as exc_info:
            account_service.authenticate("alex@gmail.com", "wrong")

        assert exc_info.value.message == "Unknown identity"

    def test_unknown_login_emits_security_warning(self, account_service, security_events):
        """Un identifiant inconnu laisse une trace dans le journal de securite."""
        with pytest.raises(IdentityUnknownError):
            account_service.resolve_identity("nobody@gmail.com")

        assert len(security_events) == 1
        assert security_events[0]["level"].name == "WARNING"
        assert security_events[0]["extra"]["security"] is True
        assert "nobody@gmail.com" in security_events[0]["message"]

    def test_bad_password_emits_security_warning(self, account_service, security_events):
        with pytest.raises(IdentityUnknownError):
            account_service.authenticate("alex@gmail.com", "wrong")

        assert [event["level"].name for event in security_events] == ["WARNING"]
        assert "wrong" not in security_events[0]["message"]

    def test_successful_login_emits_no_security_event(self, account_service, security_events):
        account_service.authenticate("alex@gmail.com", "123456")

        assert security_events == []
