from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    float をそのまま渡すと 2 進数の誤差を引き継ぐため、必ず str を経由させる。
    """
    if isinstance(v, Decimal):
        return v
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal value: {v!r}") from e


def is_blank(v: str | None) -> bool:
    """None・空文字・空白のみの文字列を未入力とみなす"""
    return v is None or not v.strip()
