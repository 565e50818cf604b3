# funcionarios/__main__.py
import uvicorn
from funcionarios.core.config import get_settings

def main() -> None:
    settings = get_settings()
    uvicorn.run("funcionarios.main:app", host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
