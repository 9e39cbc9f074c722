from __future__ import annotations
from fractions import Fraction
from typing import List
import re
from rational import Rational
from polynomial import Polynomial

# Simple lexer + shunting-yard for univariate polynomials
class Tok:
	def __init__(self, kind: str, lex: str = "", num: Rational | None = None):
		self.kind, self.lex, self.num = kind, lex, num
	def __repr__(self) -> str:
		return f"Tok({self.kind!r}, {self.lex!r})"

_OPERAND_END = ('ID', 'NUM', ')')

def tokenize(expr: str) -> List[Tok]:
	s = expr
	i, n = 0, len(s)
	toks: List[Tok] = []
	prev = None
	while i < n:
		c = s[i]
		if c.isspace():
			i += 1; continue
		if c in "+-*/^()":
			k = c
			i += 1
			# unary minus
			if k == '-' and (prev is None or prev.kind in ('+','-','*','/','^','(','NEG')):
				k = 'NEG'
			# implicit multiplication, e.g. "2(x+1)" or ")("
			if k == '(' and prev and prev.kind in _OPERAND_END:
				toks.append(Tok('*', '*'))
			t = Tok(k, k)
			toks.append(t)
			prev = t; continue
		# number (int, a/b or finite decimal)
		if c.isdigit() or (c == '.' and i+1 < n and s[i+1].isdigit()):
			j = i
			has_dot = False
			while j < n and (s[j].isdigit() or (s[j]=='.' and not has_dot)):
				has_dot = has_dot or s[j]=='.'
				j += 1
			num_str = s[i:j]
			# "a/b" is one literal, except as an exponent: "x^4/2" is (x^4)/2
			after_pow = prev is not None and prev.kind == '^'
			if not has_dot and not after_pow and j+1 < n and s[j] == '/' and s[j+1].isdigit():
				k2 = j+1
				while k2 < n and s[k2].isdigit():
					k2 += 1
				num = Rational(int(num_str), int(s[j+1:k2]))
				j = k2
			else:
				# decimals are exact: "0.1" is 1/10
				num = Rational(Fraction(num_str))
			if prev and prev.kind in _OPERAND_END:
				toks.append(Tok('*', '*'))
			toks.append(Tok('NUM', s[i:j], num))
			i = j; prev = toks[-1]; continue
		# identifier
		if c.isalpha() or c == '_':
			j = i+1
			while j < n and (s[j].isalnum() or s[j]=='_'):
				j += 1
			if prev and prev.kind in _OPERAND_END:
				toks.append(Tok('*', '*'))
			toks.append(Tok('ID', s[i:j]))
			i = j; prev = toks[-1]; continue
		raise ValueError(f"Unexpected char {c!r} at position {i}")
	return toks

prec = {'^':4,'NEG':3,'*':2,'/':2,'+':1,'-':1}
right_assoc = {'NEG', '^'}

def to_rpn(toks: List[Tok]) -> List[Tok]:
	out: List[Tok] = []
	op: List[Tok] = []
	for t in toks:
		if t.kind in ('NUM','ID'):
			out.append(t)
		elif t.kind in prec:
			while op and op[-1].kind != '(' and ((t.kind in right_assoc and prec[t.kind] < prec[op[-1].kind]) or (t.kind not in right_assoc and prec[t.kind] <= prec[op[-1].kind])):
				out.append(op.pop())
			op.append(t)
		elif t.kind == '(':
			op.append(t)
		elif t.kind == ')':
			while op and op[-1].kind != '(':
				out.append(op.pop())
			if not op: raise ValueError("Mismatched parens")
			op.pop()
		else:
			raise ValueError("Unknown token kind")
	while op:
		if op[-1].kind == '(': raise ValueError("Mismatched parens")
		out.append(op.pop())
	return out


def _power(p: Polynomial, exp: int) -> Polynomial:
	res = Polynomial.one()
	for _ in range(exp):
		res = res * p
	return res


def eval_rpn(rpn: List[Tok], var: str = "x") -> Polynomial:
	stack: List[Polynomial] = []
	for t in rpn:
		if t.kind == 'NUM':
			stack.append(Polynomial.constant(t.num))
		elif t.kind == 'ID':
			if t.lex != var:
				raise ValueError(f"Unknown variable {t.lex!r}, expected {var!r}")
			stack.append(Polynomial.monomial(1, 1))
		elif t.kind == 'NEG':
			if not stack: raise ValueError("neg missing operand")
			stack.append(-stack.pop())
		elif t.kind in ('+','-','*','/','^'):
			if len(stack) < 2: raise ValueError("binary op missing operands")
			b = stack.pop(); a = stack.pop()
			if t.kind == '+': stack.append(a + b)
			elif t.kind == '-': stack.append(a - b)
			elif t.kind == '*': stack.append(a * b)
			elif t.kind == '/':
				# only allow division by constant
				if not b.is_constant(): raise ValueError("Division by non-constant not supported in polynomial parser")
				stack.append(a.scale(Rational(1) / b.coefficient(0)))
			elif t.kind == '^':
				if not b.is_constant(): raise ValueError("Exponent must be constant")
				exp = b.coefficient(0)
				if not exp.is_int() or exp.numerator() < 0: raise ValueError("Exponent must be non-negative integer")
				stack.append(_power(a, exp.numerator()))
		else:
			raise ValueError("Unknown RPN token")
	if len(stack) != 1: raise ValueError("Invalid expression")
	return stack[-1]


def parse_polynomial(expr: str, var: str = "x") -> Polynomial:
	if not expr.strip():
		raise ValueError("Empty expression")
	toks = tokenize(expr)
	rpn = to_rpn(toks)
	return eval_rpn(rpn, var)


def parse_rational(text: str) -> Rational:
	"""Parse "3", "-2/5" or "0.25" into an exact Rational."""
	try:
		return Rational(Fraction(text.strip()))
	except ZeroDivisionError as e:
		raise ValueError(f"Zero denominator in {text!r}") from e


def parse_coefficients(text: str) -> Polynomial:
	"""Parse an ascending coefficient list such as "1, 0, -1" (x^2 - 1)."""
	parts = [p for p in re.split(r"[,\s]+", text.strip()) if p]
	if not parts:
		raise ValueError("No coefficients given")
	return Polynomial(tuple(parse_rational(p) for p in parts))
