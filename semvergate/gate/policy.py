from enum import Enum

from semvergate.config import GateConfiguration
from semvergate.versioning import Classification


class Verdict(Enum):
    OK = "ok"
    WARNED = "warned"
    FAILED = "failed"


def decide_verdict(
    classification: Classification,
    declared_bump: Classification,
    config: GateConfiguration,
) -> Verdict:
    """
    Compare the required bump with the declared one.

    Without ``fail_on_incorrect_version`` the gate is advisory and always OK.
    Otherwise declaring less than required fails, and declaring more than
    required fails only when higher versions are not allowed (it is a warning
    when they are).
    """
    if not config.fail_on_incorrect_version:
        return Verdict.OK
    if classification > declared_bump:
        return Verdict.FAILED
    if classification < declared_bump:
        if not config.allow_higher_versions:
            return Verdict.FAILED
        return Verdict.WARNED
    return Verdict.OK
