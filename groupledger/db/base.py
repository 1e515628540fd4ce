from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
BigIntPK = BigInteger().with_variant(Integer(), "sqlite")

# Range of the BIGINT columns holding amounts and balances.
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class Base(DeclarativeBase):
    pass
