"""Contact submission value object - Domain layer.

デコード済みフォーム項目から問い合わせ（ContactSubmission）を組み立てます。
必須項目が欠けている場合は例外ではなく MissingFields を返します。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union


REQUIRED_FIELDS: tuple[str, ...] = ("name", "email", "message")


def field_or_none(fields: Mapping[str, str], key: str) -> Optional[str]:
    """空文字列は未入力として None を返す."""
    value = fields.get(key)
    return value if value else None


@dataclass(frozen=True)
class ContactSubmission:
    """検証済みの問い合わせ.

    Attributes:
        name: 送信者の名前
        email: 送信者のメールアドレス（形式は検証しない）
        message: 問い合わせ本文
    """

    name: str
    email: str
    message: str


@dataclass(frozen=True)
class MissingFields:
    """必須項目の欠落を表す検証結果.

    Attributes:
        fields: 欠落している項目名（REQUIRED_FIELDS の順）
    """

    fields: tuple[str, ...]

    def __bool__(self) -> bool:
        return bool(self.fields)


def validate_submission(
    fields: Mapping[str, str],
) -> Union[ContactSubmission, MissingFields]:
    """必須項目を検証する.

    キーが存在しない場合と空文字列の場合はどちらも欠落として扱います。

    Args:
        fields: decode_form_body() の結果

    Returns:
        ContactSubmission: すべての必須項目が揃っている場合
        MissingFields: 1つ以上の必須項目が欠けている場合
    """
    values = {key: field_or_none(fields, key) for key in REQUIRED_FIELDS}
    missing = tuple(key for key in REQUIRED_FIELDS if values[key] is None)
    if missing:
        return MissingFields(fields=missing)
    return ContactSubmission(
        name=values["name"],
        email=values["email"],
        message=values["message"],
    )


__all__ = ["ContactSubmission", "MissingFields", "REQUIRED_FIELDS", "field_or_none", "validate_submission"]
