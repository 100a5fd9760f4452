"""Print every token of a small command script."""

from cmdlang import Scanner, TokenType

DATA = """
this is a  command
\t,that continues to here

literals 'are in quotes' or these "quotes"

this 'is a command' that (some sub command for this param) calls sub commands

someaction
\t,(depends on sub action)
\t,(and this sub action)

# this is an eol commment

#(
\tThis is a block comment?

\t)#

\t#( something )#
\t
"""


def main() -> None:
    scanner = Scanner(DATA)
    while (token := scanner.scan()).type is not TokenType.EOF:
        print(token.describe())
    print(token.describe())


if __name__ == "__main__":
    main()
