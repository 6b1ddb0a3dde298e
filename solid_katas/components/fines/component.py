"""
Fines component.

Picks a FinePolicy per member type once, then computes fines through the
policy without branching on the member type.
"""

from __future__ import annotations

import logging

from solid_katas.rules.models import Rules, default_rules

from .models import FineInput, FineOutput, MemberType
from .ports import FinePolicy
from .policies import DailyRateFine, NoFine, RegularFine, StaffFine, VipFine

logger = logging.getLogger(__name__)

# Member types with a dedicated variant. Rated types not listed here get a
# plain DailyRateFine.
RATED_POLICY_TYPES: dict[str, type[DailyRateFine]] = {
    "regular": RegularFine,
    "vip": VipFine,
}

NO_FINE = NoFine()


def build_fine_policies(rules: Rules | None = None) -> dict[str, FinePolicy]:
    """
    Build the member type -> FinePolicy mapping from rules.

    Args:
        rules: Policy rules; None uses the built-in defaults

    Returns:
        Mapping of member type to its policy
    """
    rules = rules or default_rules()

    policies: dict[str, FinePolicy] = {}
    for member_type, rate in rules.fines.daily_rates.items():
        policy_cls = RATED_POLICY_TYPES.get(member_type, DailyRateFine)
        policies[member_type] = policy_cls(rate=rate)

    for member_type in rules.fines.exempt:
        policies[member_type] = StaffFine()

    return policies


def resolve_fine_policy(
    member_type: MemberType | str, policies: dict[str, FinePolicy] | None = None
) -> FinePolicy:
    """Look up the policy for a member type, falling back to NoFine."""
    policies = policies if policies is not None else build_fine_policies()

    policy = policies.get(member_type)
    if policy is None:
        logger.debug(f"No fine policy for member_type={member_type!r}, using NoFine")
        return NO_FINE
    return policy


def calculate_fine(
    member_type: MemberType | str,
    days: int,
    policies: dict[str, FinePolicy] | None = None,
) -> float:
    """
    Fine owed by a member of `member_type` for `days` overdue days.

    Unknown member types owe 0.0.
    """
    return resolve_fine_policy(member_type, policies).calculate_fine(days)


def run(
    inp: FineInput, policies: dict[str, FinePolicy] | None = None
) -> FineOutput:
    policy = resolve_fine_policy(inp.member_type, policies)
    return FineOutput(
        member_type=inp.member_type,
        days=inp.days,
        amount=policy.calculate_fine(inp.days),
        policy=type(policy).__name__,
    )
