"""decimath -- arbitrary-precision elementary functions over decimal.Decimal.

Every function takes an explicit decimal.Context; see decimath.core.context.
"""

import logging

from decimath.core.context import (
    DECIMATH_DECIMAL_CONTEXT as DECIMATH_DECIMAL_CONTEXT,
)
from decimath.core.context import (
    Precision as Precision,
)
from decimath.core.context import (
    make_context as make_context,
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
from decimath.elementary.exponentiation import (
    exp as exp,
)
from decimath.elementary.exponentiation import (
    integer_exponentiation as integer_exponentiation,
)
from decimath.elementary.exponentiation import (
    ln as ln,
)
from decimath.elementary.exponentiation import (
    ln2 as ln2,
)
from decimath.elementary.exponentiation import (
    power as power,
)
from decimath.elementary.root_extraction import (
    integer_root_extraction as integer_root_extraction,
)
from decimath.elementary.root_extraction import (
    real_root_extraction as real_root_extraction,
)
from decimath.elementary.root_extraction import (
    root_extraction as root_extraction,
)
from decimath.elementary.trigonometry import (
    PiStrategy as PiStrategy,
)
from decimath.elementary.trigonometry import (
    arccos as arccos,
)
from decimath.elementary.trigonometry import (
    arccot as arccot,
)
from decimath.elementary.trigonometry import (
    arccsc as arccsc,
)
from decimath.elementary.trigonometry import (
    arcsec as arcsec,
)
from decimath.elementary.trigonometry import (
    arcsin as arcsin,
)
from decimath.elementary.trigonometry import (
    arctan as arctan,
)
from decimath.elementary.trigonometry import (
    cos as cos,
)
from decimath.elementary.trigonometry import (
    cot as cot,
)
from decimath.elementary.trigonometry import (
    csc as csc,
)
from decimath.elementary.trigonometry import (
    pi as pi,
)
from decimath.elementary.trigonometry import (
    sec as sec,
)
from decimath.elementary.trigonometry import (
    sin as sin,
)
from decimath.elementary.trigonometry import (
    tan as tan,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
