from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidStrategyError
from .model import UNSET, AccessTuple, is_unset
from .ports import AccessControlStrategy, SamenessTester
from .sameness import DEFAULT_SAMENESS_TESTER
from .strategy import DENY, PERMIT


def _check_strategy(strategy: Any) -> None:
    missing = tuple(
        name for name in ("permits", "denies") if not callable(getattr(strategy, name, None))
    )
    if missing:
        raise InvalidStrategyError(strategy, missing)


@dataclass(frozen=True, eq=False)
class Ace:
    """Access control entry.

    Binds a strategy to an optional principal, securable and action. A field
    left as ``UNSET`` is a wildcard: the entry applies to every value in that
    dimension. Comparisons of identities go through ``sameness_tester``.

    Entries are immutable; build them with :meth:`of`, :meth:`permitting` or
    :meth:`denying`.
    """

    strategy: AccessControlStrategy
    principal: Any = UNSET
    securable: Any = UNSET
    action: Any = UNSET
    sameness_tester: SamenessTester = field(default=DEFAULT_SAMENESS_TESTER, repr=False)

    def __post_init__(self) -> None:
        _check_strategy(self.strategy)
        if self.sameness_tester is None:
            object.__setattr__(self, "sameness_tester", DEFAULT_SAMENESS_TESTER)

    # -- factories -------------------------------------------------------------

    @classmethod
    def of(
        cls,
        strategy: AccessControlStrategy,
        *,
        principal: Any = UNSET,
        securable: Any = UNSET,
        action: Any = UNSET,
        sameness_tester: SamenessTester | None = None,
    ) -> "Ace":
        return cls(
            strategy=strategy,
            principal=principal,
            securable=securable,
            action=action,
            sameness_tester=sameness_tester or DEFAULT_SAMENESS_TESTER,
        )

    @classmethod
    def permitting(
        cls,
        *,
        principal: Any = UNSET,
        securable: Any = UNSET,
        action: Any = UNSET,
        sameness_tester: SamenessTester | None = None,
    ) -> "Ace":
        """Entry that statically permits *principal* to take *action* on *securable*."""
        return cls.of(
            PERMIT,
            principal=principal,
            securable=securable,
            action=action,
            sameness_tester=sameness_tester,
        )

    @classmethod
    def denying(
        cls,
        *,
        principal: Any = UNSET,
        securable: Any = UNSET,
        action: Any = UNSET,
        sameness_tester: SamenessTester | None = None,
    ) -> "Ace":
        """Entry that statically denies *action* on *securable* to *principal*."""
        return cls.of(
            DENY,
            principal=principal,
            securable=securable,
            action=action,
            sameness_tester=sameness_tester,
        )

    # -- applicability ---------------------------------------------------------

    def _matches(self, own: Any, given: Any) -> bool:
        if is_unset(own):
            return True
        if is_unset(given):
            return False
        return bool(self.sameness_tester(given, own))

    def applies_to_principal(self, principal: Any) -> bool:
        return self._matches(self.principal, principal)

    def applies_to_action(self, action: Any) -> bool:
        return self._matches(self.action, action)

    def applies_to_securable(self, securable: Any) -> bool:
        return self._matches(self.securable, securable)

    def applies_to_strategy(self, strategy: Any) -> bool:
        return bool(self.sameness_tester(strategy, self.strategy))

    def applies_to(
        self, *, principal: Any = UNSET, securable: Any = UNSET, action: Any = UNSET
    ) -> bool:
        return (
            self.applies_to_securable(securable)
            and self.applies_to_action(action)
            and self.applies_to_principal(principal)
        )

    # -- decisions -------------------------------------------------------------

    def permits(
        self,
        principal: Any = UNSET,
        action: Any = UNSET,
        securable: Any = UNSET,
        data: Any = None,
    ) -> bool:
        """True if this entry applies, its strategy does not deny, and it permits."""
        if not self.applies_to(principal=principal, securable=securable, action=action):
            return False
        access = AccessTuple(principal=principal, action=action, securable=securable)
        return not self.strategy.denies(access, data) and bool(self.strategy.permits(access, data))

    def denies(
        self,
        principal: Any = UNSET,
        action: Any = UNSET,
        securable: Any = UNSET,
        data: Any = None,
    ) -> bool:
        """True if this entry applies and its strategy explicitly denies."""
        if not self.applies_to(principal=principal, securable=securable, action=action):
            return False
        access = AccessTuple(principal=principal, action=action, securable=securable)
        return bool(self.strategy.denies(access, data))
