from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, Iterator, List, Optional

from .ace import Ace
from .model import UNSET, is_unset
from .ports import AccessControlStrategy, DecisionLogSink, MetricsObserve, MetricsSink, SamenessTester
from .sameness import DEFAULT_SAMENESS_TESTER
from .strategy import DENY, PERMIT

logger = logging.getLogger("aclx.core.acl")

_COLLECTIONS = (list, tuple, set, frozenset)


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, _COLLECTIONS):
        return list(value)
    return [value]


def _merge(plural: Any, single: Any, plural_name: str, single_name: str) -> List[Any]:
    if is_unset(single):
        return _as_list(plural)
    if not is_unset(plural):
        raise TypeError(f"pass either {plural_name}= or {single_name}=, not both")
    return [single]


class Acl:
    """Access control list.

    Holds an ordered collection of :class:`Ace` and answers deny-overrides,
    fail-closed questions about it:

      - any applicable entry denying any requested (principal, action) vetoes;
      - otherwise every requested action must be permitted to at least one of
        the requested principals.

    Mutations hold an internal lock for the whole lookup-and-splice. Queries
    evaluate a snapshot taken under that lock, so strategies never run while
    it is held and never see a half-applied mutation.
    """

    def __init__(
        self,
        entries: Optional[List[Ace]] = None,
        *,
        sameness_tester: SamenessTester | None = None,
        metrics: MetricsSink | None = None,
        decision_logger: DecisionLogSink | None = None,
    ) -> None:
        self.sameness_tester = sameness_tester or DEFAULT_SAMENESS_TESTER
        self.metrics = metrics
        self.decision_logger = decision_logger
        self._lock = threading.RLock()
        self._aces: List[Ace] = []
        for ace in entries or ():
            self.add(ace)

    # --------------------------------------------------------------------- #
    # Collection protocol
    # --------------------------------------------------------------------- #

    @property
    def entries(self) -> tuple[Ace, ...]:
        with self._lock:
            return tuple(self._aces)

    def __len__(self) -> int:
        with self._lock:
            return len(self._aces)

    def __iter__(self) -> Iterator[Ace]:
        return iter(self.entries)

    def __contains__(self, ace: object) -> bool:
        with self._lock:
            return any(a is ace for a in self._aces)

    def __repr__(self) -> str:
        return f"Acl(entries={len(self)})"

    # --------------------------------------------------------------------- #
    # Decisions
    # --------------------------------------------------------------------- #

    def permits(
        self,
        principals: Any = UNSET,
        actions: Any = UNSET,
        securable: Any = UNSET,
        data: Any = None,
        *,
        principal: Any = UNSET,
        action: Any = UNSET,
    ) -> bool:
        """Return whether *principals* are collectively permitted all *actions*.

        ``principals`` and ``actions`` may be single values or collections.
        ``principal``/``action`` name a single value instead; giving both the
        singular and plural form of one is a TypeError.
        Denial of any principal for any action on *securable* vetoes; every
        action must otherwise be permitted to at least one principal.
        """
        start = time.perf_counter()
        principals = _merge(principals, principal, "principals", "principal")
        actions = _merge(actions, action, "actions", "action")
        aces = self._find_applicable(principals, actions, securable)

        if self._denies(aces, principals, actions, securable, data):
            allowed, reason = False, "denied"
        else:
            allowed = self._all_permitted(aces, principals, actions, securable, data)
            reason = "permitted" if allowed else "not_permitted"

        self._emit("permits", principals, actions, securable, allowed, reason, len(aces), start)
        return allowed

    def denies(
        self,
        principals: Any = UNSET,
        actions: Any = UNSET,
        securable: Any = UNSET,
        data: Any = None,
        *,
        principal: Any = UNSET,
        action: Any = UNSET,
    ) -> bool:
        """Return whether any of *principals* is explicitly denied any of *actions*."""
        start = time.perf_counter()
        principals = _merge(principals, principal, "principals", "principal")
        actions = _merge(actions, action, "actions", "action")
        aces = self._find_applicable(principals, actions, securable)
        denied = self._denies(aces, principals, actions, securable, data)

        self._emit(
            "denies",
            principals,
            actions,
            securable,
            not denied,
            "denied" if denied else "no_denial",
            len(aces),
            start,
        )
        return denied

    def _find_applicable(self, principals: List[Any], actions: List[Any], securable: Any) -> List[Ace]:
        return [
            ace
            for ace in self.entries
            if any(ace.applies_to_principal(p) for p in principals)
            and any(ace.applies_to_action(a) for a in actions)
            and ace.applies_to_securable(securable)
        ]

    @staticmethod
    def _denies(
        aces: List[Ace], principals: List[Any], actions: List[Any], securable: Any, data: Any
    ) -> bool:
        for ace in aces:
            for principal in principals:
                for action in actions:
                    if ace.denies(principal, action, securable, data):
                        logger.debug(
                            "aclx: %r denies %r %r on %r", ace, principal, action, securable
                        )
                        return True
        return False

    @staticmethod
    def _all_permitted(
        aces: List[Ace], principals: List[Any], actions: List[Any], securable: Any, data: Any
    ) -> bool:
        # one slot per distinct action; the same action may be requested twice
        pending: List[Any] = []
        for action in actions:
            if not any(action is p or action == p for p in pending):
                pending.append(action)

        for action in pending:
            if not any(
                ace.permits(principal, action, securable, data)
                for ace in aces
                for principal in principals
            ):
                return False
        return True

    # --------------------------------------------------------------------- #
    # Mutations
    # --------------------------------------------------------------------- #

    def secure(
        self,
        strategy: AccessControlStrategy,
        *,
        principal: Any = UNSET,
        securable: Any = UNSET,
        action: Any = UNSET,
    ) -> "Acl":
        """Add an entry unless an equivalent one is already present. Returns self."""
        with self._lock:
            index = self._index_of(strategy, principal, securable, action)
            if index is None:
                ace = Ace.of(
                    strategy,
                    principal=principal,
                    securable=securable,
                    action=action,
                    sameness_tester=self.sameness_tester,
                )
                self._aces.append(ace)
                logger.debug("aclx: added %r", ace)
            else:
                logger.debug("aclx: already present %r", self._aces[index])
        return self

    def unsecure(
        self,
        strategy: AccessControlStrategy,
        *,
        principal: Any = UNSET,
        securable: Any = UNSET,
        action: Any = UNSET,
    ) -> "Acl":
        """Remove the equivalent entry if present. Returns self."""
        with self._lock:
            index = self._index_of(strategy, principal, securable, action)
            if index is not None:
                ace = self._aces.pop(index)
                logger.debug("aclx: removed %r", ace)
            else:
                logger.debug(
                    "aclx: nothing to remove for %r %r %r %r", strategy, principal, securable, action
                )
        return self

    def permit(
        self, *, principal: Any = UNSET, securable: Any = UNSET, action: Any = UNSET
    ) -> "Acl":
        return self.secure(PERMIT, principal=principal, securable=securable, action=action)

    def unpermit(
        self, *, principal: Any = UNSET, securable: Any = UNSET, action: Any = UNSET
    ) -> "Acl":
        return self.unsecure(PERMIT, principal=principal, securable=securable, action=action)

    def deny(
        self, *, principal: Any = UNSET, securable: Any = UNSET, action: Any = UNSET
    ) -> "Acl":
        return self.secure(DENY, principal=principal, securable=securable, action=action)

    def undeny(
        self, *, principal: Any = UNSET, securable: Any = UNSET, action: Any = UNSET
    ) -> "Acl":
        return self.unsecure(DENY, principal=principal, securable=securable, action=action)

    def find(
        self,
        strategy: AccessControlStrategy,
        *,
        principal: Any = UNSET,
        securable: Any = UNSET,
        action: Any = UNSET,
    ) -> Ace | None:
        """Return the entry :meth:`secure`/:meth:`unsecure` would match, if any."""
        with self._lock:
            index = self._index_of(strategy, principal, securable, action)
            return None if index is None else self._aces[index]

    def _index_of(self, strategy: Any, principal: Any, securable: Any, action: Any) -> int | None:
        # securable only narrows the lookup when one is given
        for i, ace in enumerate(self._aces):
            if (
                ace.applies_to_principal(principal)
                and ace.applies_to_action(action)
                and ace.applies_to_strategy(strategy)
                and (is_unset(securable) or ace.applies_to_securable(securable))
            ):
                return i
        return None

    # low-level entry API: no equivalence lookup

    def add(self, ace: Ace) -> "Acl":
        if not isinstance(ace, Ace):
            raise TypeError(f"expected Ace, got {type(ace).__name__}")
        with self._lock:
            self._aces.append(ace)
        return self

    def remove(self, ace: Ace) -> "Acl":
        """Remove *ace* (by identity) if present. Returns self."""
        with self._lock:
            for i, a in enumerate(self._aces):
                if a is ace:
                    del self._aces[i]
                    break
        return self

    def clear(self) -> "Acl":
        with self._lock:
            self._aces.clear()
        return self

    # --------------------------------------------------------------------- #
    # Observability
    # --------------------------------------------------------------------- #

    def _emit(
        self,
        operation: str,
        principals: List[Any],
        actions: List[Any],
        securable: Any,
        allowed: bool,
        reason: str,
        considered: int,
        start: float,
    ) -> None:
        decision = "permit" if allowed else "deny"
        if self.metrics is not None:
            try:
                self.metrics.inc("aclx_decisions_total", {"decision": decision})
                if isinstance(self.metrics, MetricsObserve):
                    self.metrics.observe(
                        "aclx_decision_seconds", time.perf_counter() - start, {"decision": decision}
                    )
            except Exception as e:
                logger.exception("aclx: metrics sink failed", exc_info=e)

        if self.decision_logger is not None:
            payload: Dict[str, Any] = {
                "operation": operation,
                "principals": principals,
                "actions": actions,
                "securable": None if is_unset(securable) else securable,
                "allowed": allowed,
                "decision": decision,
                "reason": reason,
                "entries_considered": considered,
            }
            try:
                self.decision_logger.log(payload)
            except Exception as e:
                logger.exception("aclx: decision logger failed", exc_info=e)
