# app/endpoints/customer.py
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from database.session import get_db
from crud import customer as crud
from schemas.customer import CustomerResponse, CustomerSave, INT64_MIN, INT64_MAX

log = logging.getLogger("customers.http")

router = APIRouter(prefix="/customers", tags=["Customer"])


def parse_customer_id(
    customer_id: Annotated[str, Path(pattern=r"^[+-]?[0-9]+$")],
) -> int:
    """{customer_id} 는 부호 있는 10진 int64 만 허용 (공백, 소수점, 범위 초과는 400)."""
    try:
        value = int(customer_id, 10)
    except ValueError:
        # 자릿수 제한(int_max_str_digits) 초과
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST) from None
    if not INT64_MIN <= value <= INT64_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
    return value


CustomerId = Annotated[int, Depends(parse_customer_id)]


@router.post("", response_model=CustomerResponse)
def save_customer(payload: CustomerSave, db: Session = Depends(get_db)):
    return crud.save(db, payload)


@router.get("", response_model=list[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    return crud.list_customers(db)


# /{customer_id} 보다 먼저 등록해야 함
@router.get("/active", response_model=list[CustomerResponse])
def list_active_customers(db: Session = Depends(get_db)):
    return crud.list_active(db)


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: CustomerId, db: Session = Depends(get_db)):
    obj = crud.get(db, customer_id)
    log.debug("fetched %r", obj)
    return obj


@router.delete("/{customer_id}", response_model=CustomerResponse)
def delete_customer(customer_id: CustomerId, db: Session = Depends(get_db)):
    return crud.delete(db, customer_id)


# ----- block / unblock -----
@router.post("/{customer_id}/block", response_model=CustomerResponse)
def block_customer(customer_id: CustomerId, db: Session = Depends(get_db)):
    return crud.set_active(db, customer_id, False)


@router.delete("/{customer_id}/block", response_model=CustomerResponse)
def unblock_customer(customer_id: CustomerId, db: Session = Depends(get_db)):
    return crud.set_active(db, customer_id, True)
