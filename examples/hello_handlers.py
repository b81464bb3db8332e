"""Handlers referenced by clikit.yaml. Run `clikit` from this directory."""


def hello(action, args):
    print(f"hello {action.name}: {dict(args.named)}")


def say(action, args):
    print(f"Hello {args.get('name')}, you are {args.get('age')}!")


def deploy(action, args):
    mode = "dry run" if args.get("dry-run") else "live"
    print(f"Deploying {args.get('service')} ({mode}) with a {len(args.get('token'))}-char token.")
