#setup: pip install -e ".[test]"
#setup: flask --app contribution_planner.wsgi run --port 5000 --debug

from contribution_planner.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=5000, debug=True)
