from apps.users_api.main import run

if __name__ == "__main__":
    run()
