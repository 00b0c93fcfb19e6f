"""decimath.core -- precision contexts, numeric predicates, errors."""

from decimath.core.context import (
    DECIMATH_DECIMAL_CONTEXT as DECIMATH_DECIMAL_CONTEXT,
)
from decimath.core.context import (
    GUARD_DIGITS as GUARD_DIGITS,
)
from decimath.core.context import (
    Precision as Precision,
)
from decimath.core.context import (
    make_context as make_context,
)
from decimath.core.context import (
    working_context as working_context,
)
from decimath.core.errors import (
    DecimathError as DecimathError,
)
from decimath.core.errors import (
    DomainError as DomainError,
)
from decimath.core.errors import (
    PreconditionError as PreconditionError,
)
