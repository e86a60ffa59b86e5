import logging

# our public exports, relatively minimal
from packedbits.bitvector import BitVector as BitVector
from packedbits.exc import (
    BitVectorError as BitVectorError,
    DecodeError as DecodeError,
    OutOfRangeError as OutOfRangeError,
    SizeMismatchError as SizeMismatchError,
    UnsupportedOperationError as UnsupportedOperationError,
)
from packedbits.iterator import BitIterator as BitIterator
from packedbits.utils import TRACE

logging.addLevelName(TRACE, "TRACE")
