"""Email sender interface - Domain layer contract.

このインターフェースはメール送信機能の契約を定義します。
具体的な実装（SMTP等）はInfrastructure層で提供されます。

送信結果は例外ではなく SendResult で返します。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from .email_message import EmailMessage


@dataclass(frozen=True)
class SendResult:
    """1回の送信試行の結果.

    Attributes:
        ok: 送信に成功した場合True
        detail: 失敗時の詳細（サーバーログ用。クライアントには返さない）
    """

    ok: bool
    detail: Optional[str] = None

    @classmethod
    def success(cls) -> "SendResult":
        return cls(ok=True)

    @classmethod
    def transport_error(cls, detail: str) -> "SendResult":
        return cls(ok=False, detail=detail)


@runtime_checkable
class EmailSender(Protocol):
    """メール送信インターフェース（Protocol）.

    構造的部分型付けにより、メソッドシグネチャが一致すれば
    明示的な継承なしにこのプロトコルを実装したとみなされます。
    """

    def send(self, message: EmailMessage) -> SendResult:
        """メールを1回だけ送信する.

        Args:
            message: 送信するメールメッセージ

        Returns:
            SendResult: 送信結果。トランスポート層の失敗も SendResult で返す

        Raises:
            Exception: トランスポート以外の想定外のエラー
        """
        ...

    def validate_config(self) -> bool:
        """設定が有効かどうかを検証する.

        Returns:
            bool: 設定が有効な場合True、無効な場合False
        """
        ...
