#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
"""Graph IR exceptions."""


class OperatorRegistrationError(RuntimeError):
    """Raised when an operator can not be registered."""

    pass


class OperatorNotFoundError(ValueError):
    """Raised when an operator name is not in the registry."""

    pass


class AttributeParseError(RuntimeError):
    """Raised when an operator attribute parser fails."""

    pass


class InvalidOutputIndexError(IndexError):
    """Raised when an entry refers to a non existing output of its node."""

    pass


class InvalidArityError(ValueError):
    """Raised when an arity function returns an invalid count."""

    pass
