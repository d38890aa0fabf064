# src/teleport_nav/testing/__init__.py
"""Deterministic fakes for exercising the pathfinder without a world."""

from __future__ import annotations

from .fakes import FakeReachabilityOracle, OracleCall, StepClock

__all__ = ["FakeReachabilityOracle", "OracleCall", "StepClock"]
