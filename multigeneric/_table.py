#!/usr/bin/env python
# -*- coding: utf-8 -*-
from functools import update_wrapper
from types import MappingProxyType
import sys

__all__ = ['ANY', 'MISSING', 'class_name', 'Method', 'MethodTable', 'resolve']

ANY = sys.intern('ANY')
MISSING = sys.intern('MISSING')


def class_name(cls):
    """class_name(cls) -> str

    Returns the interned name *cls* is keyed by in a method table.
    Builtins use their bare name, other classes are prefixed with their module.
    Strings are taken to be class names already.
    """
    if isinstance(cls, str):
        if not cls:
            raise TypeError('Class names must not be empty.')
        return sys.intern(cls)
    if not isinstance(cls, type):
        raise TypeError(f'{cls!r} is not a class or a class name.')
    if cls.__module__ == 'builtins':
        return sys.intern(cls.__qualname__)
    return sys.intern(f'{cls.__module__}.{cls.__qualname__}')


class Method:
    """ A function registered on a generic for one signature """

    def __init__(self, generic_name, signature, func):
        self.generic_name = generic_name
        self.signature = tuple(signature)
        self.func = func
        update_wrapper(self, func)

    def __call__(self, *args, **kwargs):
        return self.func(*args, **kwargs)

    def __repr__(self):
        return '<method {}({})>'.format(self.generic_name, ', '.join(self.signature))


class MethodTable:
    """One level of a generic's method table.

    Maps class names to a nested MethodTable (one level per dispatch argument)
    or, at the last level, to a Method.
    """

    def __init__(self):
        self._children = {}
        self.children = MappingProxyType(self._children)

    def lookup(self, key):
        return self._children.get(key)

    def add(self, signature, method):
        """add(signature, method) -> previous method or None

        Stores *method* under *signature*, one key per level, creating
        intermediate tables as needed.
        """
        node = self
        for key in signature[:-1]:
            child = node._children.get(key)
            if child is None:
                child = node._children[key] = MethodTable()
            elif not isinstance(child, MethodTable):
                raise TypeError(f'{child!r} is registered at a shallower depth than {signature!r}.')
            node = child
        previous = node._children.get(signature[-1])
        if isinstance(previous, MethodTable):
            raise TypeError(f'Signature {signature!r} is shorter than the table is deep.')
        node._children[signature[-1]] = method
        return previous

    def __iter__(self):
        for child in self._children.values():
            if isinstance(child, MethodTable):
                yield from child
            else:
                yield child

    def __len__(self):
        return sum(1 for _ in self)


def resolve(table, signature, depth=0):
    """resolve(table, signature, depth=0) -> <Method> or None

    Walks *table* one dispatch argument at a time. At each level the classes
    of the argument are tried most specific first, then ANY; the first
    class whose subtree yields a method wins.
    """
    if depth >= len(signature):
        return None
    last = depth == len(signature) - 1
    for key in signature[depth]:
        found = _resolve_child(table.lookup(key), signature, depth, last)
        if found is not None:
            return found
    return _resolve_child(table.lookup(ANY), signature, depth, last)


def _resolve_child(child, signature, depth, last):
    # entries at the wrong depth are ignored
    if isinstance(child, MethodTable):
        if not last:
            return resolve(child, signature, depth + 1)
    elif isinstance(child, Method):
        if last:
            return child
    return None
