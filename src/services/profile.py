"""
Profile settings service.

This is where cycle settings are validated before they are stored. The
calculation services assume a profile that already passed through here.
"""
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.models.profile import (
    UserCycleProfile,
    ProfileSettingsUpdate,
    MIN_CYCLE_LENGTH,
    MAX_CYCLE_LENGTH
)
from src.services.exceptions import ProfileValidationError

logger = Logger()

def apply_settings_update(
    profile: UserCycleProfile,
    update: ProfileSettingsUpdate
) -> UserCycleProfile:
    """
    Merge a settings update into a profile and validate the result.

    Args:
        profile: Current stored profile
        update: Requested changes; unset fields are kept

    Returns:
        New validated profile

    Raises:
        ProfileValidationError: If the cycle length leaves [21, 45] or the
            period length no longer fits inside the cycle
    """
    changes = update.model_dump(exclude_unset=True, exclude_none=True)

    cycle_length = changes.get("cycle_length", profile.cycle_length)
    if not MIN_CYCLE_LENGTH <= cycle_length <= MAX_CYCLE_LENGTH:
        logger.warning("Rejected cycle length update", extra={
            "user_id": profile.user_id,
            "cycle_length": cycle_length
        })
        raise ProfileValidationError(
            f"cycle_length must be between {MIN_CYCLE_LENGTH} and {MAX_CYCLE_LENGTH} days",
            fields=["cycle_length"]
        )

    try:
        updated = UserCycleProfile(**{**profile.model_dump(), **changes})
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) or "profile" for err in e.errors()})
        logger.warning("Rejected profile update", extra={
            "user_id": profile.user_id,
            "fields": fields
        })
        raise ProfileValidationError(
            "; ".join(err["msg"] for err in e.errors()),
            fields=fields
        ) from e

    logger.info("Applied profile settings update", extra={
        "user_id": profile.user_id,
        "changed_fields": sorted(changes)
    })
    return updated
