from enum import IntEnum


class RepoPermission(IntEnum):
    """Repository access tiers as reported by GitHub, lowest first."""

    NONE = 0
    READ = 1
    TRIAGE = 2
    WRITE = 3
    MAINTAIN = 4
    ADMIN = 5

    @classmethod
    def from_api(cls, data: dict) -> "RepoPermission":
        """Decode a collaborator permission response.

        `role_name` carries the fine-grained role (maintain, triage, ...). Custom
        organization roles report their own name there, in which case the legacy
        `permission` field (admin/write/read/none) is used instead.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Unrecognized permission payload: {data!r}")
        for key in ("role_name", "permission"):
            value = data.get(key)
            if isinstance(value, str) and value.upper() in cls.__members__:
                return cls[value.upper()]
        raise ValueError(f"Unrecognized permission payload: {data!r}")
