# nasmlang

`nasmlang` is the front end for a small imperative language. It splits
program text into typed tokens. It parses the tokens into a binary syntax
tree. It can also write that tree out as a Graphviz description.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The language

Tokens are separated by spaces or newlines. This includes parentheses,
brackets and operators. A program is a sequence of statements, each one
followed by `;`. The word `end` closes the program:

```
x = 5 ;
while ( x > 0 ) { print ( x ) ; x = x - 1 ; } ;
end
```

Supported constructs:

- assignment: `name = expression`
- arithmetic: `+ - * /`, with the usual precedence and parentheses
- comparisons: `< > <= >= == !=`, at most one per expression
- built-in functions in expressions: `sqrt ( e )`, `sin ( e )`, `cos ( e )`
- output: `print ( e )`
- control flow: `if ( cond ) statement` and `while ( cond ) statement`
- blocks: `{ statement ; statement ; }`
- return: `return expression`
- function definitions at the top level: `def name ( a ; b ) statement`
- calls: `result = call name ( a ; b )`

## Library use

```python
from nasmlang.tokenizer import tokenize
from nasmlang.parser import parse
from nasmlang.tree import to_dot, dump

tokens = tokenize("x = 2 + 3 ; print ( x ) ; end")
root = parse(tokens)

print(root.value)     # ";"  (statements are chained by ";" nodes)
print(to_dot(root))   # Graphviz source for the tree
dump(root)            # writes dump/dump.gv and, if `dot` is installed, dump/dump.png
```

### `nasmlang.tokenizer`

- `tokenize(text)` splits text on spaces and newlines. It returns a list of
  `Token(type, value)`. A token is `def`, another reserved word or symbol, a
  number (it starts with a digit) or an identifier. These have the types
  `NodeType.FUNCTION`, `OPERATION`, `NUMBER` and `IDENTIFIER`.
- `tokenize_file(path="code.txt")` reads a file and tokenizes it.
- `is_keyword(word)` tells whether a word is reserved.

### `nasmlang.parser`

- `parse(tokens)`, or `Parser(tokens).parse()`, returns the root `Node`.
- A syntax error raises `ParseError`, a `ValueError` subclass. Its
  `position` attribute holds the index of the offending token. Running out
  of tokens before `end` is also a `ParseError`.

### `nasmlang.tree`

- `Node(type, value, left=None, right=None)` is a dataclass node. Number
  nodes never keep children. `children()` returns the children that are
  present.
- `NodeType` lists the node kinds. Each kind has a `label` and a `color`,
  which the dump uses.
- `copy_node(node)` deep-copies a subtree.
- `subtree_contains_variable(node)` tells whether any identifier occurs in
  a subtree.
- `to_dot(root)` returns Graphviz text for the tree.
- `dump(root, path="dump/dump.gv", render=True)` writes that text to a file
  and returns its path. When `render` is true it runs `dot` to make a PNG
  next to the file. If `dot` is not installed, this step is skipped.

## What this package does not do

This package stops at the syntax tree. It does not generate assembly or any
other output code from the tree. It also does not check variables or scopes
beyond what the grammar requires. It has no command-line program; use it as
a library.