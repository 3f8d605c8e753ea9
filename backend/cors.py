# backend/cors.py
"""Origin allow-list check for cross-origin callers.

The gate only decides which Access-Control-* headers to send; it never
blocks the request itself. Same-origin and non-browser clients don't send
an Origin header and get no headers at all.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

ALLOWED_METHODS = ("GET", "POST", "PATCH", "DELETE")
ALLOWED_HEADERS = ("Content-Type", "Authorization")


@dataclass(frozen=True)
class GateDecision:
    allow_origin: Optional[str] = None
    allow_methods: Optional[Tuple[str, ...]] = None
    allow_headers: Optional[Tuple[str, ...]] = None


def authorize(origin: Optional[str], accepted_origins, preflight: bool = False) -> GateDecision:
    if not origin or origin not in accepted_origins:
        return GateDecision()
    if preflight:
        return GateDecision(origin, ALLOWED_METHODS, ALLOWED_HEADERS)
    # echo the exact origin, never "*"
    return GateDecision(origin)


def apply_decision(decision: GateDecision, response):
    """Copy a decision onto a Flask/werkzeug response and return it."""
    if decision.allow_origin:
        response.headers["Access-Control-Allow-Origin"] = decision.allow_origin
        response.vary.add("Origin")
    if decision.allow_methods:
        response.headers["Access-Control-Allow-Methods"] = ", ".join(decision.allow_methods)
    if decision.allow_headers:
        response.headers["Access-Control-Allow-Headers"] = ", ".join(decision.allow_headers)
    return response
