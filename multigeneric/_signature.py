#!/usr/bin/env python
# -*- coding: utf-8 -*-
from functools import singledispatch
from inspect import BoundArguments, Parameter

from ._table import MISSING, class_name

__all__ = ['Object', 'new_object', 'obj_dispatch', 'Promise', 'force', 'Super', 'super_',
           'build_signature']

_UNSET = object()


class Object:
    """ Root of the dispatchable class hierarchy """

    def __repr__(self):
        return f'<{class_name(type(self))} object>'


def new_object():
    """new_object() -> <Object>

    Returns a fresh instance of the root class.
    """
    return Object()


@singledispatch
def obj_dispatch(value):
    """obj_dispatch(value) -> tuple of class names

    Returns the classes *value* dispatches on, most specific first.
    By default this is the method resolution order of its type;
    register overloads to give other types their own class lists.
    """
    return tuple(class_name(cls) for cls in type(value).__mro__)


class Promise:
    """An argument that has not been evaluated yet.

    *func* is called with no arguments the first time the promise is forced.
    The result is stored, so later forces return the same value without
    calling *func* again.
    """

    def __init__(self, func):
        if not callable(func):
            raise TypeError(f'{func!r} is not callable')
        self.func = func
        self._value = _UNSET

    @property
    def forced(self):
        return self._value is not _UNSET

    def force(self):
        if self._value is _UNSET:
            self._value = self.func()
        return self._value

    def _set_value(self, value):
        self._value = value

    def __repr__(self):
        if self.forced:
            return f'<Promise forced={self._value!r}>'
        return f'<Promise {self.func!r}>'


def force(value):
    """ Evaluates *value* if it is a Promise, otherwise returns it unchanged """
    if isinstance(value, Promise):
        return value.force()
    return value


class Super:
    """ A value dispatched on with an overridden class list """

    def __init__(self, value, class_list):
        self.value = value
        self.class_list = tuple(class_list)

    def __repr__(self):
        return 'Super({!r}, {!r})'.format(self.value, self.class_list)


def super_(value, cls):
    """super_(value, cls) -> <Super>

    Wraps *value* so that a generic called with it dispatches on the classes
    after *cls* in its class list, i.e. to the next method after the one
    registered for *cls*.

    Class lists are never empty, so *cls* must not be the last class of
    *value*: TypeError is raised rather than dispatching on ANY alone.
    """
    if isinstance(value, Super):
        value, class_list = value.value, value.class_list
    else:
        class_list = obj_dispatch(value)
    name = class_name(cls)
    try:
        index = class_list.index(name)
    except ValueError:
        raise TypeError(f'{value!r} does not inherit from {name}.') from None
    tail = class_list[index + 1:]
    if not tail:
        raise TypeError(f'{name} is the last class of {value!r}; there is no method to fall back to.')
    return Super(value, tail)


def build_signature(bound, dispatch_count):
    """build_signature(bound, dispatch_count) -> (dispatch_classes, call_args)

    *bound* holds the arguments of a generic call bound to the generic's
    formals. The first *dispatch_count* formals are evaluated, once each, to
    find the class lists to dispatch on. The remaining arguments are passed
    on untouched.

    Returns a tuple with a class list per dispatch argument and the
    BoundArguments to call the selected method with.
    """
    dispatch_classes = []
    arguments = {}
    for i, (name, param) in enumerate(bound.signature.parameters.items()):
        if i >= dispatch_count:
            if name in bound.arguments:
                arguments[name] = bound.arguments[name]
            continue

        if name in bound.arguments:
            arg = bound.arguments[name]
        elif param.default is not Parameter.empty:
            arg = param.default
        else:
            dispatch_classes.append((MISSING,))
            continue

        value = force(arg)
        if isinstance(value, Super):
            classes = value.class_list
            value = value.value
        else:
            classes = obj_dispatch(value)
        if isinstance(arg, Promise):
            arg._set_value(value)
        dispatch_classes.append(tuple(classes))
        arguments[name] = value

    return tuple(dispatch_classes), BoundArguments(bound.signature, arguments)
