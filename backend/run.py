from config import Config
from inspired import create_app

app = create_app()


def print_banner(port: int):
    prefix = Config.API_PREFIX
    print(f"Inspired catalog API is running at http://localhost:{port}")
    print("Press CTRL+C to stop the server")
    print("Available endpoints:")
    print(f"GET {prefix} - goods list with pagination")
    print(f"GET {prefix}/{{id}} - single item by id")
    print(f"GET {Config.CATEGORIES_MARKER} - category list")
    print(f"GET {Config.COLORS_MARKER} - color list")
    print(f"GET {prefix}?[param]")
    print("Params:")
    print("    top={gender} - 8 random top goods")
    print("    gender")
    print("    category&gender")
    print("    type")
    print("    search - search by title and description")
    print("    count - page size (12)")
    print("    page - page number (1)")
    print("    list={id},{id} - goods by id list")


if __name__ == '__main__':
    port = Config.PORT
    if Config.APP_ENV != 'test':
        print_banner(port)
    app.run(host='0.0.0.0', port=port)
