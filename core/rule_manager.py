from core.hard_rules import HardRule
from core.state import ValidationContext
from schemas.shifts.assign import Decision
from utils.logger import logger


class RuleManager:
    def __init__(self, context: ValidationContext):
        self.context = context
        self.rules: list[tuple[str, HardRule]] = []

    def add_rule(self, name: str, rule: HardRule, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append((name, rule))

    def first_violation(self) -> Decision:
        """Apply registered rules in order, stopping at the first rejection."""
        for name, rule in self.rules:
            decision = rule.check(self.context)
            if decision is not None:
                logger.debug(f"Rule {name!r} rejected {self.context.proposed!r}: {decision.details}")
                return decision
        return Decision.accept()
