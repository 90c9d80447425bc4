# server/core/transactions.py

from datetime import date
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import UnauthorizedError
from models.transaction import Transaction


# -------------------------------
# Owner-scoped Transaction Store
# -------------------------------

def list_by_owner(db: Session, user_id: int) -> list[Transaction]:
    """
    Returns the user's transactions, newest date first.
    """
    return (
        db.query(Transaction)
        .filter(Transaction.user_id == user_id)
        .order_by(
            Transaction.date.desc(),
            Transaction.created_at.desc(),
            Transaction.id.desc(),
        )
        .all()
    )


def create_transaction(
    db: Session,
    user_id: int,
    type: str,
    category: str,
    amount: float,
    note: str,
    date: date,
) -> Transaction:
    transaction = Transaction(
        user_id=user_id,
        type=type,
        category=category,
        amount=amount,
        note=note,
        date=date,
    )
    db.add(transaction)
    try:
        db.commit()
    except IntegrityError:
        # owner id no longer resolves to a user
        db.rollback()
        raise UnauthorizedError()
    db.refresh(transaction)
    return transaction


def update_transaction(
    db: Session,
    transaction_id: int,
    user_id: int,
    type: str,
    category: str,
    amount: float,
    note: str,
    date: date,
) -> int:
    """
    Replaces the editable fields of a transaction the user owns.
    Returns the number of rows changed, which is 0 when the id is unknown
    or belongs to someone else.
    """
    count = (
        db.query(Transaction)
        .filter(Transaction.id == transaction_id, Transaction.user_id == user_id)
        .update(
            {
                Transaction.type: type,
                Transaction.category: category,
                Transaction.amount: amount,
                Transaction.note: note,
                Transaction.date: date,
            },
            synchronize_session=False,
        )
    )
    db.commit()
    return count


def delete_transaction(db: Session, transaction_id: int, user_id: int) -> int:
    count = (
        db.query(Transaction)
        .filter(Transaction.id == transaction_id, Transaction.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return count
