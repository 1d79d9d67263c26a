from typing import (
    NewType,
)


ValidatorIndex = NewType('ValidatorIndex', int)
