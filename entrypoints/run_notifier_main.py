import runpy
import traceback

def main():
    try:
        # Equivalent to: python -m audit_webhook.dev.run_notifier
        runpy.run_module("audit_webhook.dev.run_notifier", run_name="__main__")
    except SystemExit:
        raise
    except Exception:
        traceback.print_exc()
        input("\nPress Enter to exit...")

if __name__ == "__main__":
    main()
