"""Email message value object - Domain layer.

このモジュールは送信するメールを表す値オブジェクトを提供します。
値オブジェクトは不変（immutable）であり、作成時に必須項目を検証します。
"""

from __future__ import annotations

from dataclasses import dataclass
from email.utils import formataddr
from typing import ClassVar, Optional


@dataclass(frozen=True)
class EmailMessage:
    """メールメッセージを表す値オブジェクト.

    このクラスは不変（frozen=True）であり、作成後に変更することはできません。

    Attributes:
        to: 送信先メールアドレスのリスト
        subject: メールの件名
        body: メールの本文（プレーンテキスト、単一パート）
        from_address: 送信元メールアドレス
        from_name: 送信元の表示名（オプション）
        reply_to: 返信先（オプション、形式は検証しない）
    """

    to: list[str]
    subject: str
    body: str
    from_address: Optional[str] = None
    from_name: Optional[str] = None
    reply_to: Optional[str] = None

    # バリデーション用の最小メールアドレス長
    _MIN_EMAIL_LENGTH: ClassVar[int] = 3

    def __post_init__(self) -> None:
        """バリデーション実行."""
        if not self.to:
            raise ValueError("受信者が指定されていません")
        if not self.subject:
            raise ValueError("件名が指定されていません")
        if not self.body:
            raise ValueError("本文が指定されていません")

        for email in self.to:
            if not self._is_valid_email(email):
                raise ValueError(f"無効なメールアドレス: {email}")

    @property
    def formatted_from(self) -> Optional[str]:
        """表示名付きの From ヘッダー値（例: ``Name <user@example.com>``）."""
        if not self.from_address:
            return None
        if not self.from_name:
            return self.from_address
        return formataddr((self.from_name, self.from_address))

    @staticmethod
    def _is_valid_email(email: str) -> bool:
        """メールアドレスの基本的な検証.

        Args:
            email: 検証するメールアドレス

        Returns:
            bool: 有効な場合True
        """
        if not email or not isinstance(email, str):
            return False
        # 簡易的な検証（@が含まれていることのみ）
        return "@" in email and len(email) > EmailMessage._MIN_EMAIL_LENGTH
