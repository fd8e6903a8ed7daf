# etl/ids_components.py
import re

# Ideographic Description Characters U+2FF0..U+2FFF
# ⿰ (Left-Right), ⿱ (Top-Bottom), ⿲ (L-M-R), ⿳ (T-M-B), ⿴ .. ⿻ (surround/overlap), ⿼ .. ⿿
IDS_OPERATORS = frozenset(chr(cp) for cp in range(0x2FF0, 0x3000))

ENTITY_START = "&"
ENTITY_END = ";"

# &U-i001+2FF1; is an operator written as an entity reference.
# &U-i001+20541; is a variant of U+20541 and stays a component.
EXTENDED_IDC_RE = re.compile(r"&U-i[^+]*\+2FF[^;]*;")


def is_extended_idc(token: str) -> bool:
    return EXTENDED_IDC_RE.match(token) is not None


def extract_components(ids):
    """
    Splits an IDS string into its components, in order.
    ⿰木米 -> ['木', '米'], ⿱&CDP-855B;米 -> ['&CDP-855B;', '米']
    Operators are dropped wherever they appear.
    """
    components = []
    current = ""
    in_entity = False

    for c in ids:
        if c == ENTITY_START:
            in_entity = True
            current += c
        elif c == ENTITY_END and in_entity:
            current += c
            if not is_extended_idc(current):
                components.append(current)
            current = ""
            in_entity = False
        elif in_entity:
            current += c
        elif c not in IDS_OPERATORS:
            components.append(c)

    # Unclosed entity (shouldn't happen with valid data)
    if current:
        components.append(current)

    return components


def component_key(components):
    # Sort whole tokens, never the characters inside an entity reference
    return "".join(sorted(components))
