from fasthtml.common import serve

from countermodel.app.configuration import ApplicationConfig
from countermodel.app.configurator import create_app

config = ApplicationConfig.from_environment()
app = create_app(config=config)


if __name__ == "__main__":
    print("\n" + "="*60)
    print(f"🔢 {config.ui.title} starting on http://{config.web.host}:{config.web.port}")
    print("="*60)

    serve(appname="countermodel.main", host=config.web.host, port=config.web.port, reload=config.web.debug)
