"""decimath.helpers -- series summation, number suppliers, root solver."""

from decimath.helpers.cache import (
    Cache as Cache,
)
from decimath.helpers.newton import (
    NewtonRaphsonProvider as NewtonRaphsonProvider,
)
from decimath.helpers.summation import (
    Summation as Summation,
)
from decimath.helpers.suppliers import (
    FactorialSupplier as FactorialSupplier,
)
from decimath.helpers.suppliers import (
    NumberSupplier as NumberSupplier,
)
from decimath.helpers.suppliers import (
    exact_factorial as exact_factorial,
)
