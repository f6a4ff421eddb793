from .ace import Ace
from .acl import Acl
from .actions import PrimitiveAction
from .errors import AclError, InvalidStrategyError
from .model import UNSET, AccessTuple
from .ports import AccessControlStrategy, DecisionLogSink, MetricsSink, SamenessTester
from .sameness import DEFAULT_SAMENESS_TESTER, is_same
from .strategy import DENY, PERMIT, CallbackStrategy, StaticStrategy

__all__ = [
    "Ace",
    "Acl",
    "AccessTuple",
    "AccessControlStrategy",
    "AclError",
    "CallbackStrategy",
    "DecisionLogSink",
    "DEFAULT_SAMENESS_TESTER",
    "DENY",
    "InvalidStrategyError",
    "MetricsSink",
    "PERMIT",
    "PrimitiveAction",
    "SamenessTester",
    "StaticStrategy",
    "UNSET",
    "is_same",
]
