# # Functions in Python
#
# Functions package code into reusable blocks. This lesson shows how to
# define and call functions in Python: syntax, return values, arguments,
# operators as functions, passing functions around, and documentation.
#
# ## Basic Syntax
#
# There are two ways to create a function: the `def` statement and the
# `lambda` expression.
#
# ### The `def` Statement
#
# `def` is followed by the function name, the parameters in parentheses, a
# colon, and an indented body.

def add(x, y):
    return x + y

# ### The `lambda` Expression
#
# A `lambda` creates a small function from a single expression. It can be
# bound to a name like any other value:

add = lambda x, y: x + y

# Both versions behave the same when called:

result1 = add(2, 3)  # result1 is 5 (using either definition)
print(result1)

# In practice, use `def` whenever the function gets a name: it shows up with
# that name in tracebacks and can carry a docstring. `lambda` is meant for
# short functions passed directly to other functions, as we will see below.
#
# ## Returned Values
#
# ### Single Value
#
# The most common case is returning a single value.

def square(x):
    return x * x

result = square(4)  # result is 16
print(result)

# ### Multiple Values
#
# Separating values with commas after `return` returns a tuple, which the
# caller can unpack into separate variables.

def divide_and_remainder(a, b):
    div = a // b
    rem = a % b
    return div, rem

quotient, remainder = divide_and_remainder(10, 3)  # quotient is 3, remainder is 1
print(f"Quotient: {quotient}, Remainder: {remainder}")

# The built-in `divmod(10, 3)` computes the same pair.
#
# ### Named Tuples
#
# A named tuple gives each returned value a name, which makes the result
# easier to read.

from typing import NamedTuple


class DivisionResult(NamedTuple):
    division: int
    remainder: int


def divide_and_remainder_named(a, b):
    return DivisionResult(division=a // b, remainder=a % b)

result = divide_and_remainder_named(10, 3)
print(f"Division: {result.division}")    # prints 3
print(f"Remainder: {result.remainder}")  # prints 1

# A named tuple is still a tuple, so `quotient, remainder = result` works too.
#
# ### Returning Nothing
#
# A function that only has a side effect, like printing, returns the special
# value `None`.

def print_greeting(name):
    print(f"Hello, {name}!")
    return None

print_greeting("Alice")  # prints "Hello, Alice!" and returns None

# ### Omitting the Return Statement
#
# Unlike some languages, Python does **not** return the last expression of
# a function. Without a `return` statement the function returns `None`:

def implicit_return(x):
    x + 1

result = implicit_return(5)  # result is None, not 6
print(result)

# A forgotten `return` is a common bug, so always return results explicitly.
#
# ## Arguments
#
# ### Positional Arguments
#
# Positional arguments are matched to parameters by their order.

def subtract(x, y):
    return x - y

result = subtract(5, 3)  # result is 2
print(result)

# ### Keyword Arguments
#
# Any argument can also be passed by name. Parameters listed after a `*` in
# the signature are keyword-only: they must be passed by name.

import numpy as np


def plot(x, y, *, color="red", linewidth=1):
    print(f"Plotting with color {color} and linewidth {linewidth}")

plot(range(1, 6), np.random.rand(5), color="blue", linewidth=2)

# Keyword arguments can be given in any order after the positional ones.
#
# ### Default Values
#
# Positional and keyword parameters can both have default values, which
# makes them optional.

def greet(name="world"):
    print(f"Hello, {name}!")

greet()       # prints "Hello, world!"
greet("Bob")  # prints "Hello, Bob!"

# Default values are evaluated once, when the function is defined, so avoid
# mutable defaults like `[]`; use `None` and create the list inside.
#
# ### Unpacking Arguments
#
# A `*` before a sequence passes its items as separate positional
# arguments:

args = (1, 2)
result = add(*args)  # equivalent to add(1, 2)
print(result)        # prints 3

# and `**` before a dictionary passes its items as keyword arguments:

kwargs = {"color": "green", "linewidth": 3}
plot(range(1, 6), np.random.rand(5), **kwargs)

# The same symbols in a signature collect extra arguments:

def describe(*args, **kwargs):
    print(f"positional: {args}, keyword: {kwargs}")

describe(1, 2, unit="cm")

# ## Operators
#
# Python's operators are available as ordinary functions in the `operator`
# module.

import operator

result = operator.add(1, 2)  # equivalent to 1 + 2
print(result)                # prints 3

# ## Passing Functions to Other Functions and Assigning to Variables
#
# Functions are first-class values: they can be assigned to variables,
# stored in containers, and passed to other functions.
#
# ### Assigning Functions to Variables

myadd = operator.add
result = myadd(3, 4)  # result is 7
print(result)

myfunc = add
result = myfunc(5, 6)  # result is 11
print(result)

# ### Passing Functions to Other Functions
#
# `map` applies a function to every item of an iterable. It returns a lazy
# iterator, so we wrap it in `list` to see the values:

squares = list(map(square, [1, 2, 3]))  # squares is [1, 4, 9]
print(squares)

# ### Anonymous Functions
#
# A `lambda` can be passed directly without a name:

result = list(map(lambda x: x ** 2, [1, 2, 3]))  # result is [1, 4, 9]
print(result)

# The same result as a list comprehension, which is often preferred:
# `[x ** 2 for x in [1, 2, 3]]`.
#
# Here is a function that takes another function as an argument:

def apply_twice(f, x):
    return f(f(x))

result = apply_twice(lambda x: x + 1, 5)  # result is 7 (5 + 1 = 6, 6 + 1 = 7)
print(result)

# ## Documenting Functions
#
# A docstring is a string literal placed as the first statement of the
# function body. The blank line inside the docstring would normally end a
# cell, so `# +` and `# -` mark where this cell starts and ends.

# +
def add(x, y):
    """Compute the sum of `x` and `y`.

    Examples:
        >>> add(1, 2)
        3
    """
    return x + y

print(add.__doc__)
# -

# In the interactive interpreter, `help(add)` shows this documentation. The
# `>>>` lines double as tests that the `doctest` module can run.
#
# That concludes our lesson on functions in Python! You now have the tools to
# define, use, and document functions.
