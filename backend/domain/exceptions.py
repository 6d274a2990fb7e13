class SongServiceError(Exception):
    """楽曲APIのドメイン例外の基底クラス"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class SongValidationError(SongServiceError):
    """パス/クエリ/ボディの入力不正 (400)"""


class SongNotFoundError(SongServiceError):
    """該当行なし、またはフィルタ結果が空 (404)"""


class SongInfoError(SongServiceError):
    """外部 song info サービスの通信/ステータス/デコード失敗 (500)"""


class SongStoreError(SongServiceError):
    """DB操作の失敗 (500)"""
