"""Optional MetricsSink adapters.

Import the concrete sink from its module; each one needs its extra installed:
``aclx[metrics-prometheus]`` or ``aclx[metrics-otel]``.
"""
