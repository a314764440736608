import sys

def main():
    from app import VpnSettingsApp
    VpnSettingsApp().run()
    sys.exit(0)

if __name__ == "__main__":
    main()
