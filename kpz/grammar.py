# One grammar for all three modes. Operators bind, from loosest to tightest:
# + -, then * / %, then a single non-associative ^, then a unary sign.
# Terminals are produced by kpz.lexer.Tokenizer, never by Lark itself.
# MISSING is never lexed: the parser feeds it in place of an absent operand.
calc_grammar = """
    ?start: term

    ?term: factor
         | term "+" factor     -> add
         | term "-" factor     -> sub

    ?factor: power
           | factor "*" power  -> mul
           | factor "/" power  -> div
           | factor "%" power  -> mod

    ?power: unary
          | unary "^" unary    -> pow

    ?unary: primary
          | "+" primary
          | "-" primary        -> neg

    ?primary: "(" term ")"     -> group
            | NUMBER           -> number
            | NAME             -> var
            | NAME "=" term    -> assign_var
            | MISSING          -> missing

    PLUS: "+"
    MINUS: "-"
    STAR: "*"
    SLASH: "/"
    PERCENT: "%"
    CIRCUMFLEX: "^"
    EQUAL: "="
    LPAR: "("
    RPAR: ")"

    %declare NUMBER NAME MISSING
"""
