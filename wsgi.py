from dotenv import load_dotenv

from core.settings import load_settings
from webapp import create_app

load_dotenv()

# 認証情報が無い場合は FatalConfigError で起動を中止する
app = create_app(load_settings())
