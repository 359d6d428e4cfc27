"""Supported target roles."""

from enum import Enum

from cover_lens.exceptions import UnknownRoleError


class AIRole(str, Enum):
    """Roles with a dedicated role-specific keyword list."""

    MACHINE_LEARNING_ENGINEER = "Machine Learning Engineer"
    DATA_SCIENTIST = "Data Scientist"
    AI_RESEARCHER = "AI Researcher"
    MLOPS_ENGINEER = "MLOps Engineer"
    DATA_ENGINEER = "Data Engineer"
    NLP_ENGINEER = "NLP Engineer"
    COMPUTER_VISION_ENGINEER = "Computer Vision Engineer"


def parse_role(value: "AIRole | str | None") -> AIRole | None:
    """Convert user input into an AIRole.

    Accepts an AIRole, its exact display value ("Data Scientist") or its
    member name in any case ("data_scientist"). None passes through.

    Raises:
        UnknownRoleError: If the value does not name a supported role.
    """
    if value is None or isinstance(value, AIRole):
        return value

    try:
        return AIRole(value)
    except ValueError:
        pass

    member = AIRole.__members__.get(value.strip().upper())
    if member is not None:
        return member

    supported = ", ".join(role.value for role in AIRole)
    raise UnknownRoleError(f"Unknown role '{value}'. Supported roles: {supported}")
