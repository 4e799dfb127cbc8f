import regex

# Extended grapheme cluster
_GRAPHEME = regex.compile(r"\X")


def strip_parentheses(text: str) -> str:
    """
    Delete everything inside parentheses, keeping parentheses inside tags.

    The first wikilink of an article must be in the main text, so links in
    parenthesised asides (pronunciations, etymologies) must not be picked up.
    ``(hello)hello`` becomes ``hello``, but ``<a href="hello_(hello)"></a>``
    is left unchanged.
    """
    paren_depth = 0
    tag_depth = 0
    result = []
    for grapheme in _GRAPHEME.findall(text):
        # A '<' inside an open parenthetical does not start a tag.
        if paren_depth <= 0:
            if grapheme == "<":
                tag_depth += 1
            elif grapheme == ">":
                tag_depth -= 1

        if tag_depth > 0:
            result.append(grapheme)
            continue

        if grapheme == "(":
            paren_depth += 1
        # Emit before handling ')' so the closing delimiter is dropped too.
        if paren_depth == 0:
            result.append(grapheme)
        if grapheme == ")":
            paren_depth -= 1

    return "".join(result)
