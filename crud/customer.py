# crud/customer.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete as sa_delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import Executable

from core.exceptions import CustomerNotFound, CustomerStoreError
from models.customer import Customer
from schemas.customer import CustomerSave

log = logging.getLogger("customers")


# =========================
# Helpers
# =========================
def _store_error(db: Session, operation: str, customer_id: Optional[int] = None) -> CustomerStoreError:
    log.exception("customers.%s failed (id=%s)", operation, customer_id)
    try:
        db.rollback()
    except SQLAlchemyError:
        # 끊긴 커넥션이면 rollback 도 실패한다
        log.exception("rollback after customers.%s failed", operation)
    return CustomerStoreError(operation, customer_id)


def _write_returning(
    db: Session,
    stmt: Executable,
    *,
    operation: str,
    customer_id: Optional[int] = None,
    must_exist: bool = False,
) -> Optional[Customer]:
    """
    INSERT/UPDATE/DELETE ... RETURNING 한 건 실행 후 commit.
    must_exist=True 이면 결과가 없을 때 NoResultFound 가 저장소 오류로 처리된다.
    """
    try:
        result = db.scalars(stmt)
        obj = result.one() if must_exist else result.one_or_none()
        db.commit()
    except SQLAlchemyError as e:
        raise _store_error(db, operation, customer_id) from e
    return obj


# =========================
# Reads
# =========================
def get(db: Session, customer_id: int) -> Customer:
    try:
        obj = db.execute(
            select(Customer).where(Customer.id == customer_id)
        ).scalar_one_or_none()
    except SQLAlchemyError as e:
        raise _store_error(db, "get", customer_id) from e

    if obj is None:
        raise CustomerNotFound(customer_id)
    return obj


def list_customers(db: Session) -> List[Customer]:
    try:
        return list(db.execute(select(Customer).order_by(Customer.id)).scalars().all())
    except SQLAlchemyError as e:
        raise _store_error(db, "list") from e


def list_active(db: Session) -> List[Customer]:
    stmt = select(Customer).where(Customer.active.is_(True)).order_by(Customer.id)
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as e:
        raise _store_error(db, "list_active") from e


# =========================
# Writes
# =========================
def set_active(db: Session, customer_id: int, active: bool) -> Customer:
    """block(False) / unblock(True). 갱신 후 상태를 그대로 돌려준다."""
    stmt = (
        update(Customer)
        .where(Customer.id == customer_id)
        .values(active=active)
        .returning(Customer)
    )
    obj = _write_returning(db, stmt, operation="set_active", customer_id=customer_id)
    if obj is None:
        raise CustomerNotFound(customer_id)
    return obj


def delete(db: Session, customer_id: int) -> Customer:
    """삭제 직전 상태를 반환."""
    stmt = sa_delete(Customer).where(Customer.id == customer_id).returning(Customer)
    obj = _write_returning(db, stmt, operation="delete", customer_id=customer_id)
    if obj is None:
        raise CustomerNotFound(customer_id)
    return obj


def save(db: Session, payload: CustomerSave) -> Customer:
    """
    id 가 비어 있으면 INSERT (id/active/created 는 DB 기본값),
    아니면 name/phone 수정.

    수정 대상 id 가 없어도 NotFound 로 구분하지 않고 CustomerStoreError 로 처리된다.
    """
    if payload.is_new:
        stmt = insert(Customer).values(name=payload.name, phone=payload.phone).returning(Customer)
        return _write_returning(db, stmt, operation="insert", must_exist=True)

    stmt = (
        update(Customer)
        .where(Customer.id == payload.id)
        .values(name=payload.name, phone=payload.phone)
        .returning(Customer)
    )
    return _write_returning(db, stmt, operation="update", customer_id=payload.id, must_exist=True)
