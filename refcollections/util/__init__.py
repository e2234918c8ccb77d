

from .core import (sentinel,
                   default,
                   quoted,
                   type_name,
                   format_args,
                   trace)
