import boto3
from botocore.exceptions import ClientError, NoCredentialsError, NoRegionError
from rich.console import Console
from rich.panel import Panel

from .config import Config


def verify_aws_connectivity(config: Config) -> boto3.Session:
    """
    Performs pre-flight checks before the test runner is even instantiated.
    - Initializes a boto3 session.
    - Verifies credentials and region are configured.
    - Verifies the target Lambda function exists and is reachable.
    - Exits gracefully with a clear error message on failure.
    """
    console = Console()
    console.print("\n--- [bold blue]Pre-flight Checks[/bold blue] ---")

    try:
        session_args = {}
        if config.aws_region:
            session_args["region_name"] = config.aws_region

        session = boto3.Session(**session_args)
        lambda_client = session.client("lambda")
        console.log(
            f"[green]✓[/green] Boto3 session initialized in region '{session.region_name}'."
        )

        lambda_client.get_function_configuration(
            FunctionName=config.lambda_function_name
        )
        console.log(
            f"[green]✓[/green] Access confirmed for Lambda function: '{config.lambda_function_name}'"
        )

        console.print("[bold green]✅ Pre-flight checks passed.[/bold green]")
        return session

    except NoCredentialsError:
        console.print("\n[bold red]❌ PRE-FLIGHT CHECK FAILED[/bold red]\n")
        error_message = (
            "AWS credentials not found. Please configure them using one of the following methods:\n"
            "  1. Environment variables (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY)\n"
            "  2. A shared credentials file (~/.aws/credentials) with a profile.\n"
            "  3. An IAM role attached to the EC2 instance or ECS task."
        )
        console.print(
            Panel(error_message, title="Authentication Error", border_style="red")
        )
        exit(2)

    except NoRegionError:
        console.print("\n[bold red]❌ PRE-FLIGHT CHECK FAILED[/bold red]\n")
        error_message = (
            "An AWS region was not specified. Please configure it using one of the following methods:\n"
            "  1. The --aws-region command-line flag.\n"
            "  2. The 'aws_region' key in your JSON config file.\n"
            "  3. The AWS_REGION or AWS_DEFAULT_REGION environment variables.\n"
            "  4. The 'region' setting in your ~/.aws/config file."
        )
        console.print(
            Panel(error_message, title="Configuration Error", border_style="red")
        )
        exit(2)

    except ClientError as e:
        console.print("\n[bold red]❌ PRE-FLIGHT CHECK FAILED[/bold red]\n")
        error_code = e.response["Error"]["Code"]
        if error_code == "ResourceNotFoundException":
            error_message = f"Lambda function not found: '{config.lambda_function_name}'. Please check the function name."
        elif error_code in ("AccessDeniedException", "403"):
            error_message = "Access Denied when trying to reach the Lambda function. Please check your IAM permissions."
        else:
            error_message = f"An unexpected AWS API error occurred: {e}"

        console.print(Panel(error_message, title="AWS API Error", border_style="red"))
        exit(2)
