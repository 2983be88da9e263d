"""
Algorithm name to signing method lookup.
"""
# Copyright 2020-2026 STMicroelectronics
# SPDX-License-Identifier: Apache-2.0

import logging

from .errors import RegistryFrozenError
from .methods import ECDSA_SIGNING_METHODS, SigningMethod

logger = logging.getLogger(__name__)


class Registry:
    """
    Mapping of algorithm names ("ES256", ...) to signing methods.

    Registrations must happen before the registry is shared with concurrent
    readers. Each registration swaps in a new mapping in one assignment, so
    lookups never take a lock. Call freeze() once start-up is done to turn
    any later registration into an error.
    """

    def __init__(self, methods=()):
        self._methods = {}
        self._frozen = False
        for method in methods:
            self.register(method.alg(), method)

    def register(self, name, method):
        """Add or replace the method stored under `name`."""
        if self._frozen:
            raise RegistryFrozenError(
                "Cannot register {}: registry is frozen".format(name))
        if not isinstance(method, SigningMethod):
            raise TypeError("{!r} does not implement alg/sign/verify"
                            .format(method))
        if name in self._methods:
            logger.warning("Replacing signing method %s", name)
        else:
            logger.debug("Registering signing method %s", name)
        methods = dict(self._methods)
        methods[name] = method
        self._methods = methods

    def lookup(self, name):
        """Return the method registered as `name`, or None."""
        return self._methods.get(name)

    def algorithms(self):
        return sorted(self._methods)

    def freeze(self):
        self._frozen = True

    @property
    def frozen(self):
        return self._frozen

    def __contains__(self, name):
        return name in self._methods

    def __len__(self):
        return len(self._methods)


default_registry = Registry(ECDSA_SIGNING_METHODS)


def register_signing_method(name, method):
    default_registry.register(name, method)


def get_signing_method(name):
    return default_registry.lookup(name)


def get_algorithms():
    return default_registry.algorithms()
