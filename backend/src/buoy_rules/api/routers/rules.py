"""Rule listing and evaluation endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from buoy_rules.api.deps import get_store
from buoy_rules.api.schemas import RuleResponse, VerdictResponse
from buoy_rules.compute.evaluator import evaluate
from buoy_rules.errors import EmptyResultSet, StoreUnavailable, UnknownRule
from buoy_rules.rules import RULES, get_rule, rule_names
from buoy_rules.store import StationStore

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("", response_model=list[RuleResponse])
def list_rules() -> list[RuleResponse]:
    return [RuleResponse.from_config(RULES[name]) for name in rule_names()]


@router.get("/{rule_name}/verdict", response_model=VerdictResponse)
def get_verdict(
    rule_name: str,
    store: StationStore = Depends(get_store),
) -> VerdictResponse:
    """Evaluate a rule against the current station snapshot."""
    try:
        config = get_rule(rule_name)
    except UnknownRule as exc:
        raise HTTPException(404, str(exc))

    try:
        verdict = evaluate(store, config)
    except EmptyResultSet as exc:
        raise HTTPException(422, str(exc))
    except StoreUnavailable as exc:
        logger.exception("Rule %s failed", rule_name)
        raise HTTPException(503, str(exc))

    return VerdictResponse.from_verdict(verdict, config)
