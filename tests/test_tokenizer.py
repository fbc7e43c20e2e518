from npmtrainer.tokenizer import tokenize


def test_tokenize_splits_on_whitespace_runs() -> None:
    assert tokenize("npm   install\tlodash  ") == ("npm", "install", "lodash")


def test_tokenize_empty_and_blank_input() -> None:
    assert tokenize("") == ()
    assert tokenize("   ") == ()


def test_tokenize_quoted_spans_are_atomic() -> None:
    assert tokenize('npm init --init-author-name="John Doe"') == ("npm", "init", "--init-author-name=John Doe")
    assert tokenize("echo 'a b' \"c d\"") == ("echo", "a b", "c d")


def test_tokenize_other_quote_is_literal_inside_span() -> None:
    assert tokenize("say \"it's fine\"") == ("say", "it's fine")
    assert tokenize("say 'a \"b\" c'") == ("say", 'a "b" c')


def test_tokenize_unterminated_quote_runs_to_end() -> None:
    assert tokenize('npm run "build app') == ("npm", "run", "build app")


def test_tokenize_backslash_is_not_an_escape() -> None:
    assert tokenize('a \\"b c"') == ("a", "\\b c")


def test_tokenize_empty_quotes_produce_no_token() -> None:
    assert tokenize('npm run ""') == ("npm", "run")
