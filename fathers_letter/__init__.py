"""
Father's Letter (天父的信)

AI 屬靈信件生成服務
- 主題 + 稱呼 → JSON 結構信件
- 無金鑰時示範模式
- 信箱 (JSON 檔案, 最多 500 筆)
"""

__version__ = "1.0.0"
__author__ = "Father's Letter Team"
