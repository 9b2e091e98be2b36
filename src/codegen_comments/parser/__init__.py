from .java_checker import CheckResult, JavaSourceChecker

__all__ = [
    "CheckResult",
    "JavaSourceChecker",
]
