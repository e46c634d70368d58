import html


class TextToken:
    def __init__(self, text):
        self.text = html.unescape(text)

    def __repr__(self):
        return repr(self.text)


class TagToken:
    def __init__(self, tag):
        self.tag = tag.strip()

    def __repr__(self):
        return "<" + self.tag + ">"


def lex(body):
    out = []
    buffer = ""
    in_tag = False
    quote = None
    i = 0
    while i < len(body):
        c = body[i]
        if not in_tag and body.startswith("<!--", i):
            # Comments never become tokens
            end = body.find("-->", i + 4)
            if buffer:
                out.append(TextToken(buffer))
                buffer = ""
            i = len(body) if end == -1 else end + 3
            continue
        if in_tag and quote:
            buffer += c
            if c == quote:
                quote = None
        elif in_tag and c in "\"'" and "=" in buffer:
            buffer += c
            quote = c
        elif c == "<":
            if buffer:
                out.append(TextToken(buffer))
                buffer = ""
            in_tag = True
        elif c == ">" and in_tag:
            out.append(TagToken(buffer))
            buffer = ""
            in_tag = False
        else:
            buffer += c
        i += 1

    if buffer and not in_tag:
        out.append(TextToken(buffer))

    return out
