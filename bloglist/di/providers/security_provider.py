from typing import TYPE_CHECKING
from ...core.config import Settings, get_settings
from ...core.security import TokenService
from ...domain.policies.ownership import PostAuthorizationPolicy

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers settings and the security collaborators built from them"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register settings, the token service and the post authorization policy.
        Settings registered beforehand (e.g. by tests) are kept.
        """
        if not container.is_registered(Settings):
            container.register_singleton(Settings, get_settings())
        settings = container.get(Settings)

        container.register_singleton(
            TokenService,
            TokenService(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.access_token_expire_minutes,
            )
        )

        container.register_singleton(
            PostAuthorizationPolicy,
            PostAuthorizationPolicy(require_owner_for_update=settings.require_owner_for_update)
        )
