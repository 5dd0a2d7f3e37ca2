"""Mini README: FastAPI JSON interface over the ledger engine.

Structure:
    * Request models - pydantic payloads for transactions, budgets and goals.
    * create_application - application factory wiring routes to an engine.

The factory receives the engine it serves instead of reaching for module
state, so tests and embedding applications can hand in their own instance.
Routes only call engine mutators and read its projections; ``NOT_FOUND``
outcomes become HTTP 404 responses.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..configuration import get_settings
from ..finance import LedgerEngine, MutationOutcome, SavingsGoalDraft, TransactionDraft
from ..logging_utils import get_logger
from ..voice import TranscriptError, parse_transcript

LOGGER = get_logger(__name__)


class TransactionPayload(BaseModel):
    """Fields accepted when creating or replacing a transaction."""

    amount: float = Field(..., allow_inf_nan=False)
    category: str = Field(..., min_length=1)
    description: str = ""
    occurred_on: datetime = Field(default_factory=datetime.now)
    transaction_type: Literal["income", "expense"]

    def to_draft(self) -> TransactionDraft:
        return TransactionDraft.build(
            amount=self.amount,
            category=self.category,
            description=self.description,
            occurred_on=self.occurred_on,
            transaction_type=self.transaction_type,
        )


class BudgetLimitPayload(BaseModel):
    limit: float = Field(..., gt=0, allow_inf_nan=False)


class SavingsGoalPayload(BaseModel):
    name: str = Field(..., min_length=1)
    target: float = Field(..., gt=0, allow_inf_nan=False)
    deadline: date
    current: float = Field(0.0, ge=0, allow_inf_nan=False)


class ContributionPayload(BaseModel):
    amount: float = Field(..., allow_inf_nan=False)


class TranscriptPayload(BaseModel):
    transcript: str


def _require_applied(outcome: MutationOutcome, detail: str) -> None:
    if outcome is MutationOutcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail=detail)


def create_application(engine: Optional[LedgerEngine] = None) -> FastAPI:
    """Create the FastAPI application bound to ``engine``."""

    settings = get_settings()
    if engine is None:
        engine = LedgerEngine.from_settings(settings)
    app = FastAPI(title="Spendwise", version="0.1.0")
    app.state.engine = engine

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report validation failures without echoing the rejected input.

        Rejected values can be non-finite floats, which JSON cannot carry.
        """

        errors = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        LOGGER.debug("Rejected request to %s: %s", request.url.path, errors)
        return JSONResponse({"detail": errors}, status_code=422)

    @app.get("/")
    async def dashboard() -> JSONResponse:
        """Return every dashboard view in one payload."""

        snapshot = engine.snapshot()
        LOGGER.debug(
            "Dashboard snapshot -> transactions: %s balance: %.2f round-up: %.2f",
            len(snapshot["transactions"]),
            snapshot["available_balance"],
            snapshot["round_up_savings"],
        )
        snapshot["currency_symbol"] = settings.currency_symbol
        return JSONResponse(snapshot)

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        payload = [transaction.as_dict() for transaction in engine.list_transactions()]
        return JSONResponse({"transactions": payload})

    @app.get("/transactions/{transaction_id}")
    async def get_transaction(transaction_id: str) -> JSONResponse:
        transaction = engine.get_transaction(transaction_id)
        if transaction is None:
            raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
        return JSONResponse(transaction.as_dict())

    @app.post("/transactions")
    async def add_transaction(payload: TransactionPayload) -> JSONResponse:
        transaction = engine.add_transaction(payload.to_draft())
        return JSONResponse(transaction.as_dict(), status_code=201)

    @app.put("/transactions/{transaction_id}")
    async def edit_transaction(transaction_id: str, payload: TransactionPayload) -> JSONResponse:
        outcome = engine.edit_transaction(transaction_id, payload.to_draft())
        _require_applied(outcome, f"Transaction {transaction_id} not found")
        return JSONResponse(engine.get_transaction(transaction_id).as_dict())

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: str) -> JSONResponse:
        outcome = engine.delete_transaction(transaction_id)
        _require_applied(outcome, f"Transaction {transaction_id} not found")
        return JSONResponse({"transaction_id": transaction_id, "outcome": outcome.value})

    @app.get("/budgets")
    async def list_budgets() -> JSONResponse:
        return JSONResponse({"budgets": [budget.as_dict() for budget in engine.list_budgets()]})

    @app.put("/budgets/{category}")
    async def update_budget(category: str, payload: BudgetLimitPayload) -> JSONResponse:
        outcome = engine.update_budget(category, payload.limit)
        _require_applied(outcome, f"No budget for category {category}")
        return JSONResponse(engine.get_budget(category).as_dict())

    @app.get("/savings")
    async def list_savings() -> JSONResponse:
        return JSONResponse(
            {
                "goals": [goal.as_dict() for goal in engine.list_goals()],
                "round_up_savings": engine.round_up_savings,
            }
        )

    @app.post("/savings")
    async def add_savings_goal(payload: SavingsGoalPayload) -> JSONResponse:
        goal = engine.add_savings_goal(
            SavingsGoalDraft(
                name=payload.name,
                target=payload.target,
                deadline=payload.deadline,
                current=payload.current,
            )
        )
        return JSONResponse(goal.as_dict(), status_code=201)

    @app.post("/savings/{goal_id}/contributions")
    async def contribute(goal_id: str, payload: ContributionPayload) -> JSONResponse:
        outcome = engine.contribute_to_goal(goal_id, payload.amount)
        _require_applied(outcome, f"Savings goal {goal_id} not found")
        goal = next(goal for goal in engine.list_goals() if goal.goal_id == goal_id)
        return JSONResponse(goal.as_dict())

    @app.get("/expenses-by-category")
    async def expenses_by_category() -> JSONResponse:
        return JSONResponse({"expenses": engine.get_expenses_by_category()})

    @app.get("/advice/affordability")
    async def affordability(amount: float = Query(..., allow_inf_nan=False)) -> JSONResponse:
        verdict = engine.can_afford(amount)
        return JSONResponse({"amount": amount, **verdict.as_dict()})

    @app.get("/advice/regret-risk")
    async def regret_risk(
        amount: float = Query(..., allow_inf_nan=False),
        category: str = Query(...),
    ) -> JSONResponse:
        assessment = engine.check_regret_risk(amount, category)
        return JSONResponse({"amount": amount, "category": category, **assessment.as_dict()})

    @app.post("/voice/parse")
    async def voice_parse(payload: TranscriptPayload) -> JSONResponse:
        """Return the candidate transaction for a transcript without recording it."""

        try:
            parsed = parse_transcript(payload.transcript)
        except TranscriptError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.info("Parsed voice transcript into %s candidate", parsed.draft.category)
        return JSONResponse(parsed.as_dict())

    return app
