"""Permissions Management"""
import logging
import yaml
from pathlib import Path
from typing import Dict, List

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
USER_ROLE = "user"


class PermissionsManager:
    """Manages role-to-permissions mapping from permissions.yml"""

    def __init__(self, permissions_file_path: str | Path | None = None):
        if permissions_file_path is None:
            # Default to permissions.yml in project root
            permissions_file_path = Path(__file__).parent.parent.parent / "permissions.yml"

        self.role_permissions = self._load_permissions(Path(permissions_file_path))

    def _load_permissions(self, file_path: Path) -> Dict[str, List[str]]:
        """Load role-to-permissions mapping from YAML file"""
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Permissions file {file_path} not found, no role grants any permission")
            return {}
        return data.get('roles', {})

    def get_permissions_for_roles(self, roles: List[str]) -> List[str]:
        """Convert list of roles to list of permissions"""
        permissions = set()
        for role in roles:
            role_perms = self.role_permissions.get(role, [])
            permissions.update(role_perms)
        return sorted(permissions)


def role_for(is_admin: bool) -> str:
    return ADMIN_ROLE if is_admin else USER_ROLE
