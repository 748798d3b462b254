import pytest

from roster.core.exceptions import AuthError, AuthErrorKind
from roster.core.security import Identity
from roster.models.employee import Role
from roster.services.access import authorize

pytestmark = pytest.mark.unit


def test_admin_is_allowed():
    authorize(Identity(user_id=1, role=Role.ADMIN), Role.ADMIN)


def test_employee_is_forbidden():
    with pytest.raises(AuthError) as exc:
        authorize(Identity(user_id=2, role=Role.EMPLOYEE), Role.ADMIN)

    assert exc.value.kind is AuthErrorKind.FORBIDDEN
    assert exc.value.status_code == 403
    assert exc.value.message == "Admin role required"


def test_roles_are_flat():
    # an admin does not implicitly satisfy an employee-only requirement
    with pytest.raises(AuthError):
        authorize(Identity(user_id=1, role=Role.ADMIN), Role.EMPLOYEE)
