import re

# Verifying keys and signatures are accepted in one spelling only: lowercase hex
IDENTITY_PATTERN = re.compile(r'[0-9a-f]{64}')
SIGNATURE_PATTERN = re.compile(r'[0-9a-f]{128}')
FUNCTION_PATTERN = re.compile(r'[a-z][a-z_]*')


def check_format(d: dict, rule: dict):
    """True when ``d`` has exactly the keys of ``rule`` and every value passes.

    A rule value is either a predicate or a nested rule dict, which is checked
    the same way.
    """
    if not is_dict(d) or set(d.keys()) != set(rule.keys()):
        return False

    for key, subrule in rule.items():
        if is_dict(subrule):
            if not check_format(d[key], subrule):
                return False
        elif not subrule(d[key]):
            return False

    return True


def identity_is_formatted(s: str):
    return type(s) == str and IDENTITY_PATTERN.fullmatch(s) is not None


def signature_is_formatted(s: str):
    return type(s) == str and SIGNATURE_PATTERN.fullmatch(s) is not None


def function_is_formatted(s: str):
    return type(s) == str and FUNCTION_PATTERN.fullmatch(s) is not None


def number_is_formatted(i: int):
    return type(i) == int and i >= 0


def is_dict(d: dict):
    return type(d) == dict
