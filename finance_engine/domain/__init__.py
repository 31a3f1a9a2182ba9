from finance_engine.domain.errors import (
    DivisionDegenerate,
    FinanceEngineError,
    InvalidArgument,
)

__all__ = ["DivisionDegenerate", "FinanceEngineError", "InvalidArgument"]
