"""SAT Package Reader - Utilities Package"""

from sat_package_reader.utils.decorators import (
    audit_log,
    measure_performance,
    performance_context
)

__all__ = [
    'audit_log',
    'measure_performance',
    'performance_context',
]
