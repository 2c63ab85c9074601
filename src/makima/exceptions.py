# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Package-specific exceptions"""


class InvalidInputError(ValueError):
    """Sample data rejected when constructing an interpolant

    check names the failed validation ('shape', 'size', 'count', 'monotonic' or
    'finite'); index is the offending position, where there is one.

    """

    def __init__(self, message, check, index=None):
        super().__init__(message)
        self.check = check
        self.index = index


class OutOfDomainError(Exception):
    """Error thrown when argument is outside function domain"""

    def __init__(self, value, lower, upper):
        super().__init__(
            f'Requested abscissa x = {value}, which is outside of allowed range '
            f'[{lower}, {upper}]'
        )
        self.value = value
        self.lower = lower
        self.upper = upper
