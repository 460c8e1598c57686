from .solver import ApspResult, ResultStatus, Strategy, build_engine, solve

__all__ = ["ApspResult", "ResultStatus", "Strategy", "build_engine", "solve"]
