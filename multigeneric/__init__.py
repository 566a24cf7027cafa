# -*- coding: utf-8 -*-
"""
# multigeneric

``functools.singledispatch`` picks an implementation from the type of the first argument.
This library adds generic functions that dispatch on the classes of several arguments at once.

A generic is created with ``new_generic()``, giving its name and the names of the arguments to dispatch on.
Implementations (*methods*) are added with the ``register()`` decorator, which takes one class per dispatch
argument. ``ANY`` matches every class.

>>> from multigeneric import new_generic, super_, Object, ANY, MISSING
>>> class Animal(Object):
...     pass
...
>>> class Dog(Animal):
...     pass
...
>>> class Cat(Animal):
...     pass
...
>>> speak = new_generic('speak', ('x', 'y'))
>>> @speak.register(Dog, Cat)
... def speak_dog_cat(x, y):
...     return 'woof at cat, then ' + speak(super_(x, Dog), y)
...
>>> @speak.register(Dog, ANY)
... def speak_dog(x, y):
...     return 'woof'
...
>>> @speak.register(ANY, ANY)
... def speak_any(x, y):
...     return '...'
...
>>> speak
<generic speak(x, y) with 3 methods>

When called, the generic looks at the classes of each dispatch argument in turn, most specific first.
The first argument is matched before the second, and ``ANY`` is only tried once every class of an argument
has failed to produce a method.

>>> speak(Dog(), Animal())
'woof'
>>> speak(Cat(), Dog())
'...'

``super_(x, Dog)`` wraps ``x`` so that the classes up to and including ``Dog`` are skipped.
Calling the generic with it runs the method that would have been chosen if ``Dog`` had no methods,
while the other arguments dispatch as usual.

>>> speak(Dog(), Cat())
'woof at cat, then ...'

The ``register()`` decorator returns the undecorated function, so methods can still be called directly
and registrations can be stacked. Without arguments it reads the classes from the annotations of the
dispatch parameters; unannotated parameters match ``ANY``.

>>> @speak.register
... def speak_cat_dog(x: Cat, y: Dog):
...     return 'hiss'
...
>>> speak(Cat(), Dog())
'hiss'

Every dispatch argument is evaluated exactly once. A ``Promise`` passed as a dispatch argument is forced
to find its class and the method receives the forced value.

>>> from multigeneric import Promise
>>> calls = []
>>> def make_dog():
...     calls.append('dog')
...     return Dog()
...
>>> p = Promise(make_dog)
>>> speak(p, Cat())
'woof at cat, then ...'
>>> calls
['dog']

Dispatch arguments that are left out dispatch on ``MISSING``.
Arguments that are not dispatched on are passed through untouched, so the method's defaults apply.

>>> describe = new_generic('describe', 'x')
>>> @describe.register(MISSING)
... def describe_missing(x=None):
...     return 'nothing'
...
>>> @describe.register(int)
... def describe_int(x):
...     return 'an int'
...
>>> describe()
'nothing'
>>> describe(True)
'an int'

When no method matches, a ``MethodLookupError`` is raised.

>>> describe('text')
Traceback (most recent call last):
  ...
multigeneric._multigeneric.MethodLookupError: Can't find method for `describe(<str>/<object>)`.

To check which method a generic will choose without calling it, use ``method()``.
Each dispatch argument is given as a class, a class name or a list of class names.

>>> from multigeneric import method
>>> method(speak, [Dog, Cat]).func is speak_dog_cat
True
>>> method(describe, ['str'], error=False) is None
True

The ``generic`` decorator turns a function into a generic with the same name and parameters,
dispatching on the first parameter unless other names are given. Its body is never called.

>>> from multigeneric import generic
>>> @generic
... def area(shape, scale=1):
...     pass
...
>>> @area.register(int)
... def area_int(shape, scale=1):
...     return shape * shape * scale
...
>>> area(3)
9
>>> area(3, scale=2)
18
"""

from ._table import *
from ._signature import *
from ._multigeneric import *

__version__ = '1.0.0'
__author__ = 'Seequent Ltd'
__license__ = 'BSD'
__copyright__ = 'Copyright 2023 Seequent Ltd'
