# scalar_autograd/autograd/ops/arithmetic.py
import numbers
from ..core.node import Node, Op
from ..core.errors import UnsupportedOperation


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a fresh leaf with zero grad."""
    return x if isinstance(x, Node) else Node(x)


def _binary(x, y, f, tag):
    """
    Generic binary primitive:
      - wraps plain numbers as leaves
      - computes out.value = f(x.value, y.value) eagerly
      - records (x, y) as operands so the engine can find the rule for `tag`
    """
    x = _as_node(x)
    y = _as_node(y)
    return Node(f(x.value, y.value), (x, y), tag)


def add(x, y): return _binary(x, y, lambda a, b: a + b, Op.ADD)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Op.MUL)


def pow(x, n):
    """
    Integer power:
      out.value = x.value ** n

    The exponent is a constant fixed at construction, not a differentiable
    operand. n == 0 has no rule and is rejected.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"only integer exponents are supported, got {n!r}")
    n = int(n)
    if n == 0:
        raise UnsupportedOperation("x ** 0 is not supported (no gradient rule for a zero exponent)")
    x = _as_node(x)
    return Node(x.value ** n, (x,), Op.POW, exponent=n)


# Derived operators are compositions of the primitives above, so their
# gradients come from the ADD / MUL / POW rules.
def neg(x): return mul(x, -1)
def sub(x, y): return add(x, neg(y))
def div(x, y): return mul(x, pow(y, -1))


# ---------------- backward rules (read out.grad, accumulate into operands) ---------------- #
def add_backward(out: Node):
    a, b = out.operands
    a.grad += out.grad
    b.grad += out.grad


def mul_backward(out: Node):
    a, b = out.operands
    a.grad += b.value * out.grad
    b.grad += a.value * out.grad


def pow_backward(out: Node):
    # d/dx x^n = n * x^(n-1), for positive and negative n alike
    (a,) = out.operands
    n = out.exponent
    a.grad += n * a.value ** (n - 1) * out.grad
