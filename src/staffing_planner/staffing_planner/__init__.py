"""Call-center staffing planner package.

This package is organized by feature modules (zones, call_volumes, parameters,
distribution, ...) with a thin Flask controller layer and service/repository
layers. The planning core (distribution calculator, roster generator) is pure
and has no Flask or database dependency.
"""
