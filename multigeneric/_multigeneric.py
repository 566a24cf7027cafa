#!/usr/bin/env python
# -*- coding: utf-8 -*-
from functools import update_wrapper
from inspect import Parameter, Signature, signature as _signature
import warnings

from ._signature import build_signature
from ._table import ANY, Method, MethodTable, class_name, resolve

__all__ = ['Generic', 'generic', 'new_generic', 'method', 'method_call', 'method_lookup_error',
           'MethodLookupError', 'CorruptGenericError']

_VARIADIC = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


class MethodLookupError(TypeError):
    """ No method of a generic matches the classes of its dispatch arguments """

    def __init__(self, name, dispatch_args, signature):
        self.name = name
        self.dispatch_args = tuple(dispatch_args)
        self.signature = tuple(signature)
        super().__init__(_lookup_error_message(name, self.dispatch_args, self.signature))


class CorruptGenericError(TypeError):
    pass


def _lookup_error_message(name, dispatch_args, signature):
    types = ['/'.join(f'<{cls}>' for cls in classes) for classes in signature]
    if len(dispatch_args) == 1:
        return f"Can't find method for `{name}({types[0]})`."
    lines = [f'- {arg}: {desc}' for arg, desc in zip(dispatch_args, types)]
    return "Can't find method for generic `{}({})` with classes:\n{}".format(
        name, ', '.join(dispatch_args), '\n'.join(lines))


def method_lookup_error(name, dispatch_args, signature):
    """ Raises MethodLookupError for *signature*; never returns """
    raise MethodLookupError(name, dispatch_args, signature)


################################################################################
### Generic - multiple-dispatch generic function
################################################################################


class Generic:
    """Multiple-dispatch generic function.

    Calling the generic evaluates its dispatch arguments, looks up the most
    specific method registered for their classes and calls it with the
    arguments of the call. Methods are added with the register() decorator
    or add_method().
    """

    def __init__(self, name, dispatch_args, signature):
        self.name = name
        self.signature = signature
        self.dispatch_args = _check_dispatch_args(dispatch_args, signature)
        self.methods = MethodTable()

    def __call__(self, *args, **kwargs):
        # unsupplied arguments are allowed; dispatch sees them as MISSING
        bound = self.signature.bind_partial(*args, **kwargs)
        return method_call(self, bound)

    def __repr__(self):
        n = len(self.methods)
        return '<generic {}({}) with {} method{}>'.format(
            self.name, ', '.join(self.signature.parameters), n, '' if n == 1 else 's')

    def describe(self):
        """describe() -> str

        Lists the registered methods of the generic, one per line.
        """
        methods = list(self.methods)
        lines = ['{}({}) with {} method{}:'.format(
            self.name, ', '.join(self.signature.parameters), len(methods), '' if len(methods) == 1 else 's')]
        lines.extend(f'{i}: {m!r}' for i, m in enumerate(methods, 1))
        return '\n'.join(lines)

    def dispatch(self, *classes):
        """dispatch(*classes) -> <Method>

        Returns the method a call with arguments of *classes* would use.
        """
        return method(self, classes)

    def add_method(self, signature, func):
        """add_method(signature, func) -> func

        Registers *func* for *signature*, one class per dispatch argument.
        """
        if isinstance(signature, (str, type)):
            signature = (signature,)
        signature = tuple(class_name(cls) for cls in signature)
        if len(signature) != len(self.dispatch_args):
            raise TypeError(
                f'`{self.name}` dispatches on {len(self.dispatch_args)} argument(s), '
                f'got a signature of {len(signature)}: {signature!r}')
        _check_method(self, func)
        new = Method(self.name, signature, func)
        previous = self.methods.add(signature, new)
        if previous is not None:
            warnings.warn(f'Overwriting method {previous!r}', stacklevel=2)
        return func

    def register(self, *classes):
        """ Decorator registering a method for the given classes.
        :param classes: one class, class name, ANY or MISSING per dispatch argument.
            May be omitted to read the classes from the annotations of the dispatch parameters.
        """
        if len(classes) == 1 and callable(classes[0]) and not isinstance(classes[0], type):
            func = classes[0]
            return self.add_method(_get_classes_from_annotations(self, func), func)
        return lambda func: self.add_method(classes, func)


def _check_dispatch_args(dispatch_args, signature=None):
    if isinstance(dispatch_args, str):
        dispatch_args = (dispatch_args,)
    dispatch_args = tuple(dispatch_args)
    if not dispatch_args:
        raise TypeError('`dispatch_args` must have at least one component')
    if not all(isinstance(arg, str) for arg in dispatch_args):
        raise TypeError('`dispatch_args` must be strings')
    if not all(dispatch_args):
        raise TypeError('`dispatch_args` must not be the empty string')
    if len(set(dispatch_args)) != len(dispatch_args):
        raise TypeError('`dispatch_args` must be unique')
    if signature is None:
        return dispatch_args

    params = list(signature.parameters.values())
    if tuple(p.name for p in params[:len(dispatch_args)]) != dispatch_args:
        raise TypeError('`dispatch_args` must be a prefix of the generic arguments')
    for param in params[:len(dispatch_args)]:
        if param.kind in _VARIADIC:
            raise TypeError(f"Can't dispatch on variadic argument `{param.name}`")
    return dispatch_args


def _check_method(generic, func):
    if not callable(func):
        raise TypeError(f'{func!r} is not callable')
    expected = [(p.name, p.kind) for p in generic.signature.parameters.values()]
    actual = [(p.name, p.kind) for p in _signature(func).parameters.values()]
    if actual != expected:
        expected = [f'{name} ({kind.description})' for name, kind in expected]
        actual = [f'{name} ({kind.description})' for name, kind in actual]
        raise TypeError(
            f'Expected `{getattr(func, "__name__", func)}` to have parameters {expected}, got {actual}')


def _get_classes_from_annotations(generic, func):
    params = _signature(func).parameters
    classes = []
    for name in generic.dispatch_args:
        param = params.get(name)
        if param is None:
            raise TypeError(f'{func!r} has no `{name}` parameter to dispatch on.')
        if param.annotation is Parameter.empty:
            classes.append(ANY)
        elif isinstance(param.annotation, type):
            classes.append(param.annotation)
        else:
            raise TypeError(
                f"Invalid annotation for {name!r}. {param.annotation!r} is not a class. "
                f"Use either `@register(some_class)` or plain `@register` on an annotated function.")
    return classes


def new_generic(name, dispatch_args, fun=None):
    """new_generic(name, dispatch_args, fun=None) -> <Generic>

    Defines a generic called *name* dispatching on *dispatch_args*, which must
    be the leading parameters of *fun*. *fun* only supplies the formals; its
    body is never called. Without it the formals are the dispatch args alone.
    """
    if not isinstance(name, str) or not name:
        raise TypeError('`name` must be a non-empty string')
    if fun is None:
        dispatch_args = _check_dispatch_args(dispatch_args)
        sig = Signature([Parameter(arg, Parameter.POSITIONAL_OR_KEYWORD) for arg in dispatch_args])
        return Generic(name, dispatch_args, sig)
    if not callable(fun):
        raise TypeError('`fun` must be a function')
    new = Generic(name, dispatch_args, _signature(fun))
    update_wrapper(new, fun)
    return new


def generic(*dispatch_args):
    """ Decorator turning a function into a Generic with its name and formals.
    :param dispatch_args: names of the leading parameters to dispatch on.
        May be omitted to dispatch on the first parameter only.
    """
    if len(dispatch_args) == 1 and callable(dispatch_args[0]):
        fun = dispatch_args[0]
        first = next(iter(_signature(fun).parameters), None)
        if first is None:
            raise TypeError(f'{fun!r} must have at least one parameter to dispatch on.')
        return new_generic(fun.__name__, (first,), fun)
    return lambda fun: new_generic(fun.__name__, dispatch_args, fun)


################################################################################
### method() and method_call() - lookup and dispatch
################################################################################


def _class_list(spec):
    if isinstance(spec, str):
        return (class_name(spec),)
    if isinstance(spec, type):
        return tuple(class_name(cls) for cls in spec.__mro__)
    try:
        specs = tuple(spec)
    except TypeError:
        raise TypeError(f'{spec!r} is not a class, a class name or a sequence of them.') from None
    if not specs:
        raise TypeError('Class lists must not be empty.')
    return tuple(class_name(cls) for cls in specs)


def method(generic, signature, error=True):
    """method(generic, signature, error=True) -> <Method> or None

    Looks up the method of *generic* for *signature*, which holds one entry
    per dispatch argument: a class name, a class (standing for its method
    resolution order) or a sequence of class names and classes, most
    specific first.

    When nothing matches, raises MethodLookupError if *error* is true and
    returns None otherwise.
    """
    if not isinstance(generic, Generic):
        raise TypeError(f'{generic!r} is not a generic')
    table = generic.methods
    if not isinstance(table, MethodTable):
        raise CorruptGenericError(f"Corrupt generic `{generic.name}`: methods isn't a MethodTable")

    signature = tuple(_class_list(spec) for spec in signature)
    if len(signature) != len(generic.dispatch_args):
        raise TypeError(
            f'`{generic.name}` dispatches on {len(generic.dispatch_args)} argument(s), '
            f'got {len(signature)} class list(s)')

    found = resolve(table, signature)
    if found is None and error:
        method_lookup_error(generic.name, generic.dispatch_args, signature)
    return found


def method_call(generic, bound):
    """method_call(generic, bound) -> result of the selected method

    *bound* holds the call's arguments bound to the generic's formals.
    """
    dispatch_classes, call_args = build_signature(bound, len(generic.dispatch_args))
    found = method(generic, dispatch_classes)
    return found(*call_args.args, **call_args.kwargs)
