"""
package: mstair.envelope.xlogging
"""

# <AUTOGEN_INIT>
from mstair.envelope.xlogging import (
    logger_constants,
    logger_factory,
    logger_util,
)


__all__ = [
    "logger_constants",
    "logger_factory",
    "logger_util",
]
# </AUTOGEN_INIT>
