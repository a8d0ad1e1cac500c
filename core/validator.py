from typing import Iterable, List, Optional
from core.catalog import ShiftCatalog
from core.hard_rules import define_hard_rules
from core.rule_manager import RuleManager
from core.state import build_context
from schemas.roster.entities import Doctor, ProposedAssignment, Shift
from schemas.hours.summary import HourLimits
from schemas.shifts.assign import Decision


def validate(
    proposed: ProposedAssignment,
    existing_shifts: Iterable[Shift],
    catalog: ShiftCatalog,
    doctors: Optional[List[Doctor]] = None,
    limits: Optional[HourLimits] = None,
) -> Decision:
    """
    Judge one proposed assignment against a snapshot of existing shifts.

    Rules run in a fixed order and the first violated rule names the rejection:
    shift type, doctor, specialty scope, weekly cap, monthly critical cap, vacation (outgoing,
    then incoming), post-night rest, time overlap. The doctor and specialty-scope rules only
    run when a roster is supplied.

    Pure: neither the snapshot nor the catalog is modified, so repeated calls on the same
    inputs give the same decision.
    """
    context = build_context(
        proposed, list(existing_shifts), catalog, limits or HourLimits(), doctors
    )
    manager = RuleManager(context)
    for name, rule in define_hard_rules().items():
        manager.add_rule(name, rule, condition=context.roster_checked or not rule.roster_only)
    return manager.first_violation()


class ConflictValidator:
    """Validator bound to a set of hour limits, for callers that check many proposals."""

    def __init__(self, limits: Optional[HourLimits] = None):
        self.limits = limits or HourLimits()

    def validate(
        self,
        proposed: ProposedAssignment,
        existing_shifts: Iterable[Shift],
        catalog: ShiftCatalog,
        doctors: Optional[List[Doctor]] = None,
    ) -> Decision:
        return validate(proposed, existing_shifts, catalog, doctors, self.limits)
