import pytest

from lighten.errors import CompileError
from lighten.tokenizer import Tokenizer, tokenize
from lighten.tokens import Token, TokenType


def kinds(source):
    return [token.type for token in tokenize(source)]


def test_keywords_are_recognised():
    assert kinds("func var int mutable struct\n") == [
        TokenType.FUNC,
        TokenType.VAR,
        TokenType.INT,
        TokenType.MUTABLE,
        TokenType.STRUCT,
    ]


def test_identifiers_keep_their_text():
    tokens = tokenize("foo1 bar\n")
    assert [t.type for t in tokens] == [TokenType.IDENTIFIER, TokenType.IDENTIFIER]
    assert [t.value for t in tokens] == ["foo1", "bar"]


def test_punctuation():
    assert kinds("(){}[]<>;@.,$|:\n") == [
        TokenType.OPEN_PAREN,
        TokenType.CLOSE_PAREN,
        TokenType.OPEN_CURLY,
        TokenType.CLOSE_CURLY,
        TokenType.OPEN_SQUARE,
        TokenType.CLOSE_SQUARE,
        TokenType.OPEN_ANGLE,
        TokenType.CLOSE_ANGLE,
        TokenType.SEMICOLON,
        TokenType.AT,
        TokenType.DOT,
        TokenType.COMMA,
        TokenType.PUBLIC_CLOSURE,
        TokenType.PIPE,
        TokenType.COLON,
    ]


def test_double_colon():
    assert kinds("a::b\n") == [TokenType.IDENTIFIER, TokenType.D_COLON, TokenType.IDENTIFIER]


def test_lines_are_counted():
    tokens = tokenize("int\n\nint\n")
    assert [t.line for t in tokens] == [1, 3]


def test_line_comment_runs_to_end_of_line():
    assert kinds("int // var float\nfloat\n") == [TokenType.INT, TokenType.FLOAT]


def test_block_comment_content_is_skipped():
    assert kinds("int /* var */\n") == [TokenType.INT]


def test_lone_slash_is_a_symbol():
    tokens = tokenize("a / b\n")
    assert tokens[1] == Token(TokenType.SYMBOLS, 1, "/")


def test_lone_star_is_a_symbol():
    tokens = tokenize("a * b\n")
    assert tokens[1] == Token(TokenType.SYMBOLS, 1, "*")


def test_string_literal_escapes_are_decoded():
    tokens = tokenize('"hi\\n"\n')
    assert tokens == [Token(TokenType.LITERAL, 1, '"hi\n"')]


def test_string_literal_with_escaped_quote():
    tokens = tokenize('"a\\"b"\n')
    assert [t.value for t in tokens] == ['"a"b"']


def test_char_literal():
    assert tokenize("'x'\n") == [Token(TokenType.LITERAL, 1, "'x'")]


def test_number_literals_keep_suffix():
    words = ["12L", "3.5f", "10b", "0FFH"]
    tokens = tokenize(" ".join(words) + "\n")
    assert all(t.type is TokenType.LITERAL for t in tokens)
    assert [t.value for t in tokens] == words


def test_boolean_words_are_literals():
    tokens = tokenize("true false\n")
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.LITERAL, "true"),
        (TokenType.LITERAL, "false"),
    ]


def test_symbol_runs_are_grouped():
    tokens = tokenize("x == y;\n")
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.IDENTIFIER, "x"),
        (TokenType.SYMBOLS, "=="),
        (TokenType.IDENTIFIER, "y"),
        (TokenType.SEMICOLON, ""),
    ]


def test_asm_block_keeps_body():
    tokens = tokenize("asm {mov eax, 1};\n")
    assert tokens == [
        Token(TokenType.ASM, 1, "mov eax, 1"),
        Token(TokenType.SEMICOLON, 1),
    ]


def test_unterminated_string_raises():
    with pytest.raises(CompileError) as err:
        tokenize('"abc')
    assert err.value.message == "Closing double quote expected"
    assert err.value.kind == "Missing token"


def test_error_reports_line():
    with pytest.raises(CompileError) as err:
        tokenize('\n\n"abc')
    assert err.value.line == 3


def test_tab_is_not_recognised():
    with pytest.raises(CompileError) as err:
        tokenize("\tint\n")
    assert err.value.kind == "Invalid Token"


def test_char_without_closing_quote_raises():
    with pytest.raises(CompileError) as err:
        tokenize("'ab'\n")
    assert err.value.message == "Closing single quote expected"


def test_asm_without_brace_raises():
    with pytest.raises(CompileError) as err:
        tokenize("asm x\n")
    assert err.value.message == "Opening curly bracket expected"


def test_asm_without_closing_brace_raises():
    with pytest.raises(CompileError) as err:
        tokenize("asm {nop\n")
    assert err.value.message == "Closing curly bracket expected"


def test_function_matches_class():
    source = "func main(): int { return 0; }\n"
    assert tokenize(source) == Tokenizer(source).tokenize()


def test_matches_compares_characters():
    tokenizer = Tokenizer("")
    assert tokenizer.matches("a", "a") is True
    assert tokenizer.matches("a", "b") is False


def test_token_display():
    assert str(tokenize("foo\n")[0]) == 'IDENTIFIER("foo")<1>'