from user_desk.app.gui_app import run_gui_app


if __name__ == "__main__":
    run_gui_app()
