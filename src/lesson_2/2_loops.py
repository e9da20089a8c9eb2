# # For Loops and While Loops in Python
#
# Loops let you repeat a block of code many times. Python has two kinds of
# loops: `for` loops, which walk over the items of a sequence, and `while`
# loops, which keep going as long as a condition holds.
#
# This lesson introduces the syntax of both, shows a few typical uses, and
# ends with exercises that put them to work.

# ## For Loops
#
# A `for` loop runs its body once for every item of an iterable: a range of
# numbers, a list, a string, the keys of a dictionary, and so on.
#
# ### Syntax
#
# ```python
# for variable in iterable:
#     # code to execute for each item
# ```
#
# - `variable` takes the value of each item of `iterable` in turn.
# - The loop ends when every item has been processed.
# - The body is the indented block below the `for` line.
#
# ### Example 1: Printing Numbers
#
# `range(1, 6)` produces the numbers 1 to 5; the stop value is not included.

for i in range(1, 6):
    print(i)  # Print the value of i

# Each value from 1 to 5 is printed on its own line.

# ### Example 2: Summing Numbers
#
# A `for` loop can accumulate a result, here the sum of 1 to 10.

total = 0  # Start from 0
for i in range(1, 11):
    total += i  # Add i to the running total
print(f"The sum of numbers from 1 to 10 is {total}")

# The loop adds each number to `total`, and the result (55) is printed once
# the loop has finished. We avoid calling the variable `sum`, because that
# would hide Python's built-in `sum` function; `sum(range(1, 11))` gives the
# same answer in one call.

# ## While Loops
#
# A `while` loop repeats its body as long as a condition is true. It is the
# right tool when the number of iterations is not known in advance.
#
# ### Syntax
#
# ```python
# while condition:
#     # code to execute while condition is true
# ```
#
# - The condition is checked before every iteration.
# - The loop stops as soon as the condition is false.
#
# ### Example 3: Counting Up

count = 1  # Start from 1
while count <= 5:
    print(count)
    count += 1  # Increase count by 1

# The loop runs while `count` is at most 5, printing and then incrementing it.

# ### Example 4: Doubling a Number
#
# Double a number until it exceeds 50.

number = 1  # Start with 1
while number <= 50:
    number *= 2  # Double the number
print(f"The first number greater than 50 is {number}")

# `number` goes through 1, 2, 4, 8, 16, 32 and 64. The loop stops at 64,
# which is printed.

# ## Loop Control Statements
#
# Two keywords change the normal flow of a loop:
#
# - `break` leaves the loop immediately.
# - `continue` skips the rest of the current iteration and moves on.
#
# ### Example 5: Using `break`
#
# Find the first number divisible by 3 between 10 and 20.

for i in range(10, 21):
    if i % 3 == 0:
        print(f"The first number divisible by 3 is {i}")
        break  # Leave the loop once the number is found

# The loop checks 10, 11 and stops at 12.

# ### Example 6: Using `continue`
#
# Print only the odd numbers from 1 to 10.

for i in range(1, 11):
    if i % 2 == 0:
        continue  # Skip even numbers
    print(i)

# For even `i` the `continue` statement skips the `print` call, so only 1, 3,
# 5, 7 and 9 are printed.

# ## Nested Loops and Comprehensions
#
# Loops can be nested to walk over two-dimensional data such as a matrix.
# For numeric matrices Python programs use NumPy arrays.
#
# ### Using Nested `for` Loops to Fill a Matrix
#
# We build a 5x5 matrix where the element in row `i` and column `j`
# (counting from 1) is `i + j`. First the dimensions:

import numpy as np

m, n = 5, 5  # m rows, n columns

# Then an uninitialized 5x5 array of 32-bit integers:

A = np.empty((m, n), dtype=np.int32)

# Python indexes from 0, so row `i` lives at index `i - 1`. The outer loop
# walks the columns, the inner loop the rows of each column:

for j in range(1, n + 1):
    for i in range(1, m + 1):
        A[i - 1, j - 1] = i + j  # Set each element to i + j

# Now `A[0, 0]` is 2 and `A[1, 2]` is 5. Displaying the matrix:

A

# ### Flattening Nested Loops
#
# `itertools.product` yields every combination of its inputs, so two nested
# loops become a single `for` statement:

import itertools

B = np.empty((m, n), dtype=np.int32)
for j, i in itertools.product(range(1, n + 1), range(1, m + 1)):
    B[i - 1, j - 1] = i + j

B

# The order of combinations matches the nested version: `j` is the outer
# loop and `i` the inner one.

# ### Comprehensions
#
# A **list comprehension** builds a list from an expression in one line. Two
# nested comprehensions give a list of rows, which NumPy turns into a matrix:

C = np.array([[i + j for j in range(1, n + 1)] for i in range(1, m + 1)])
C

# `C` holds the same numbers as `A` and `B`, but its element type is NumPy's
# default integer (`int64` on most systems). Pass `dtype=np.int32` to
# `np.array` to choose the type explicitly.
#
# NumPy can also build the matrix straight from a formula of the (0-based)
# indices:

np.fromfunction(lambda i, j: i + j + 2, (m, n), dtype=np.int32)

# ### Why Prefer Comprehensions
#
# Comprehensions are preferred because they:
# - Are more concise and readable.
# - State the intent of building a collection from a formula.
# - Avoid creating and then filling an empty container by hand.

# ## Exercises
#
# ### Exercise 1: Print the squares of numbers from 1 to 100

for i in range(1, 101):
    print(i ** 2)

# The loop prints 1, 4, 9, ..., 10000.

# ### Exercise 2: Create a dictionary `squares` with numbers and their squares
#
# The keys are the numbers from 1 to 100 and the values their squares.

squares = {}
for i in range(1, 101):
    squares[i] = i ** 2
# Check a few entries
print(squares[1])    # Should be 1
print(squares[10])   # Should be 100
print(squares[100])  # Should be 10000

# Now `squares[5]` returns 25. The same dictionary can be written as a
# dictionary comprehension: `{i: i ** 2 for i in range(1, 101)}`.

# ### Exercise 3: Create a list `squares_arr` with a list comprehension

squares_arr = [i ** 2 for i in range(1, 101)]
# Check a few entries
print(squares_arr[0])   # Should be 1
print(squares_arr[9])   # Should be 100
print(squares_arr[99])  # Should be 10000

# Note the 0-based indices: the square of 10 sits at index 9.

# ### Exercise 4: Create a list `primes` with all primes up to 100
#
# A prime is a number greater than 1 that is divisible only by 1 and itself.
# It is enough to test divisibility by the primes found so far.

primes = []  # Start with an empty list
for i in range(2, 101):
    divisible = False  # Is i divisible by any prime found so far?
    for p in primes:
        if i % p == 0:
            divisible = True
            break  # Leave the inner loop early
    if not divisible:
        primes.append(i)  # i is a prime
print(primes)

# This code:
# - Starts with an empty list `primes`.
# - Checks each number `i` from 2 to 100.
# - Uses an inner loop to test `i` against the primes already found.
# - Appends `i` when no prime divides it.
# - Ends with `[2, 3, 5, 7, 11, ..., 97]`, 25 primes in total.
#
# Python's `for` loop also accepts an `else` clause that runs only when the
# loop did not `break`, which removes the need for the flag:

primes = []
for i in range(2, 101):
    for p in primes:
        if i % p == 0:
            break
    else:
        primes.append(i)
len(primes)
