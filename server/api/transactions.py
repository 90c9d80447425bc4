# server/api/transactions.py

import datetime
import math
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from api.deps import get_current_user_id
from core import transactions as store
from core.errors import ValidationError
from core.logger import get_logger
from database import get_db
from models.transaction import TRANSACTION_TYPES


router = APIRouter()
logger = get_logger(__name__)

# largest value a SQLite INTEGER key can hold
MAX_ROW_ID = 2**63 - 1


# -------------------------------
# Request / Response Schemas
# -------------------------------

class TransactionRequest(BaseModel):
    """
    Body of create and update requests. Every field is optional at the
    schema level so that presence can be reported as a 400.
    """
    type: str | None = None
    category: str | None = None
    amount: float | str | None = None
    note: str | None = None
    date: str | None = None


class TransactionUpdateRequest(TransactionRequest):
    id: int | None = Field(default=None, ge=0, le=MAX_ROW_ID)


class TransactionDeleteRequest(BaseModel):
    id: int | None = Field(default=None, ge=0, le=MAX_ROW_ID)


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int = Field(serialization_alias="userId")
    type: str
    category: str
    amount: float
    note: str
    date: datetime.date
    created_at: datetime.datetime | None = Field(default=None, serialization_alias="createdAt")


class TransactionCreated(BaseModel):
    message: str
    transaction: TransactionOut


class UpdateCount(BaseModel):
    count: int


class TransactionUpdated(BaseModel):
    message: str
    transaction: UpdateCount


class MessageResponse(BaseModel):
    message: str


# -------------------------------
# Field Parsing
# -------------------------------

def _parse_amount(value) -> float:
    if isinstance(value, bool):
        raise ValidationError("Invalid amount")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid amount")
    if not math.isfinite(amount):
        raise ValidationError("Invalid amount")
    return amount


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValidationError("Invalid date")


def _transaction_fields(req: TransactionRequest) -> dict:
    if not req.type or not req.category or not req.amount or not req.date:
        raise ValidationError("Missing required fields")
    if req.type not in TRANSACTION_TYPES:
        raise ValidationError("Invalid transaction type")

    return {
        "type": req.type,
        "category": req.category,
        "amount": _parse_amount(req.amount),
        "note": req.note or "",
        "date": _parse_date(req.date),
    }


# -------------------------------
# Transaction Endpoints
# -------------------------------

@router.get("/transactions", response_model=list[TransactionOut])
def list_transactions(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return [TransactionOut.model_validate(t) for t in store.list_by_owner(db, user_id)]


@router.post("/transactions", response_model=TransactionCreated, status_code=status.HTTP_201_CREATED)
def create_transaction(
    req: TransactionRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    fields = _transaction_fields(req)
    transaction = store.create_transaction(db, user_id, **fields)
    logger.info("User id=%s created transaction id=%s", user_id, transaction.id)
    return {
        "message": "Transaction created",
        "transaction": TransactionOut.model_validate(transaction),
    }


@router.put("/transactions", response_model=TransactionUpdated)
def update_transaction(
    req: TransactionUpdateRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    if not req.id:
        raise ValidationError("Missing required fields")
    fields = _transaction_fields(req)

    count = store.update_transaction(db, req.id, user_id, **fields)
    logger.info("User id=%s updated transaction id=%s (%s row(s))", user_id, req.id, count)
    return {"message": "Transaction updated", "transaction": {"count": count}}


@router.delete("/transactions", response_model=MessageResponse)
def delete_transaction(
    req: TransactionDeleteRequest | None = None,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    if not req or not req.id:
        raise ValidationError("Transaction ID required")

    count = store.delete_transaction(db, req.id, user_id)
    logger.info("User id=%s deleted transaction id=%s (%s row(s))", user_id, req.id, count)
    return {"message": "Transaction deleted"}
