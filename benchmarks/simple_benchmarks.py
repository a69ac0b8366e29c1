from timeit import timeit

from skim.interpreter import Interpreter
from skim.types.symbol import Symbol
from skim.types.environment import Environment
from skim.reader.parser import parse


def time_interpreter(setup: str, code: str, rounds: int) -> float:
    """Time the evaluator only: the setup forms run once, `code` is parsed
    once and its tree is evaluated `rounds` times against the same global frame.
    """
    with Interpreter() as itp:
        for expr in parse(setup):
            itp.eval_form(expr)
        expr = parse(code)[0]
        # Warmup
        itp.eval_form(expr)
        # Timed
        t = timeit(lambda: itp.eval_form(expr), number=rounds)
        print(f"  arena objects after run: {len(itp.arena)}")
        return t


# Environment lookup chain (no evaluation involved)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.bind(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(parent=env)
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACT_SETUP = r"""
(define fact
  (lambda (n acc)
    (if (<= n 1)
        acc
        (fact (- n 1) (* n acc)))))
"""

SUM_SETUP = r"""
(define sum-n
  (lambda (n acc)
    (if (<= n 0)
        acc
        (sum-n (- n 1) (+ acc n)))))
"""

FIB_SETUP = r"""
(define fib
  (lambda (n)
    (cond ((< n 2) n)
          (else (+ (fib (- n 1)) (fib (- n 2)))))))
"""


def _print(name: str, setup: str, code: str, rounds: int) -> None:
    print(f"Benchmark: {name}")
    t = time_interpreter(setup, code, rounds)
    print(f"  interpreter: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print("lambda application", "", LAMBDA_APPLY_CODE, rounds=20000)
    _print("recursion (factorial)", FACT_SETUP, "(fact 20 1)", rounds=500)
    _print("arithmetic sum 1..500", SUM_SETUP, "(sum-n 500 0)", rounds=200)
    _print("tree recursion (fib 15)", FIB_SETUP, "(fib 15)", rounds=5)
