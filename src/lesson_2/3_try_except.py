# # Error Handling in Python

# Reliable programs have to deal with things going wrong. This lesson covers
# Python's exception handling: `try`, `except`, `else`, `finally` and `raise`.

# ## Raising Exceptions

# An exception is raised with the `raise` statement. The function below
# rejects negative inputs with a `ValueError`:

import math


def sqrt_if_positive(x):
    if x < 0:
        raise ValueError("Negative input not allowed")
    return math.sqrt(x)

# ## Basic `try`-`except` Syntax

# Code that might fail goes in the `try` block; the `except` block handles
# the error:

try:
    x = 1 / 0
except Exception as e:
    print("Caught an error:", repr(e))

# `as e` binds the exception object, so it can be printed or inspected.

# ## Handling Specific Exceptions

# Each `except` clause names the exception types it handles. Python tries the
# clauses in order and runs the first one that matches:

try:
    x = 1 / 0
except ZeroDivisionError as e:
    print("Division error handled:", e)
except Exception as e:
    print("Other error occurred:", e)

# Catching the specific type is better than checking types by hand with
# `isinstance` inside a single broad handler.

# ## Index Errors

# Reading past the end of a list raises an `IndexError`:

arr = [1, 2, 3]
try:
    print(arr[3])
except IndexError as e:
    print("List access error:", e)

# ## The `else` Clause

# Code in `else` runs only when the `try` block finished without an
# exception. Keeping it out of `try` avoids catching errors by accident:

try:
    value = int("42")
except ValueError:
    print("Not a number")
else:
    print("Parsed", value)

# ## The `finally` Clause

# `finally` holds cleanup code that runs whether or not an exception
# occurred:

f = open("testfile.txt", "w")
try:
    f.write("Important data")
except OSError as e:
    print("Write error:", e)
finally:
    f.close()
    print("File closed successfully")

# For files and other resources the `with` statement does the same cleanup
# for you, and is the usual way to write this:
#
# ```python
# with open("testfile.txt", "w") as f:
#     f.write("Important data")
# ```

# ## Re-raising Exceptions

# After partial handling, such as logging, a bare `raise` inside `except`
# re-raises the current exception so a caller can handle it:

try:
    sqrt_if_positive(-5)
except ValueError as e:
    print("Logging error:", e)
    raise  # Propagates the exception up

# Because nothing above this code catches the exception, the program stops
# here when run as a script.

# ## Putting It Together

# A complete example combining these pieces:

def process_data(data):
    try:
        if not data:
            raise ValueError("Empty data")
        return data[0] / data[2]
    except ZeroDivisionError:
        print("Division error handled")
        return math.nan
    except IndexError:
        print("Index error handled")
        return 0.0
    except Exception as e:
        print("Unknown error:", e)
        raise
    finally:
        print("Data processing complete")

# Test cases:

process_data([1, 2, 0])  # Division error, returns nan
process_data([1])        # Index error, returns 0.0
process_data([1, 2, 4])  # Successful case, returns 0.25

# `process_data([])` would print "Unknown error: Empty data" and re-raise the
# `ValueError` after the `finally` block has run.

# ## Best Practices

# 1. Catch specific exception types when possible
# 2. Release resources with `with` or `finally`
# 3. Only catch exceptions you can handle meaningfully
# 4. Use a bare `raise` to re-raise, which keeps the original traceback
# 5. Never use a bare `except:`, which also catches `KeyboardInterrupt`

# For more information, see the Python tutorial chapter on
# [Errors and Exceptions](https://docs.python.org/3/tutorial/errors.html).
