from roster.core.exceptions import AuthError, AuthErrorKind
from roster.core.security import Identity
from roster.models.employee import Role


def authorize(identity: Identity, required_role: Role) -> None:
    # flat roles: equality, no hierarchy
    if identity.role != required_role:
        raise AuthError(AuthErrorKind.FORBIDDEN, f"{required_role.value.capitalize()} role required")
