# e2e_tests/components/runner.py
import json
import time
import uuid
import xml.etree.ElementTree as ET
from typing import Any, List, Optional, TypedDict

import boto3
from botocore.client import Config as BotocoreConfig
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import Config


# --- Data Structures ---


class ValidationResult(TypedDict):
    check: str
    status: str  # 'PASS' or 'FAIL'
    details: str


# --- Constants ---
SUCCESS_MESSAGE = "Successfully retrieved buckets"


def _result(check: str, passed: bool, details: str) -> ValidationResult:
    return {"check": check, "status": "PASS" if passed else "FAIL", "details": details}


def validate_response(
    payload: Any, expected_buckets: Optional[List[str]] = None
) -> List[ValidationResult]:
    """
    Checks a handler response against the statusCode/body envelope contract.
    When `expected_buckets` is given, the returned names must match it exactly,
    including order.
    """
    results: List[ValidationResult] = []

    if not isinstance(payload, dict):
        results.append(
            _result("envelope", False, f"Expected a JSON object, got {type(payload).__name__}.")
        )
        return results

    keys = set(payload)
    results.append(
        _result(
            "envelope",
            keys == {"statusCode", "body"},
            f"Response keys: {sorted(keys)}",
        )
    )

    status_code = payload.get("statusCode")
    results.append(
        _result("statusCode", status_code == 200, f"statusCode = {status_code!r}")
    )

    raw_body = payload.get("body")
    try:
        body = json.loads(raw_body) if isinstance(raw_body, str) else None
    except json.JSONDecodeError:
        body = None
    if not isinstance(body, dict):
        results.append(_result("body", False, "Body is not a JSON-encoded object."))
        return results

    message = body.get("message")
    results.append(_result("message", message == SUCCESS_MESSAGE, f"message = {message!r}"))

    buckets = body.get("buckets")
    buckets_ok = isinstance(buckets, list) and all(isinstance(b, str) for b in buckets)
    results.append(
        _result(
            "buckets",
            buckets_ok,
            f"{len(buckets)} bucket name(s) returned" if buckets_ok else "Missing or invalid 'buckets' list.",
        )
    )

    if expected_buckets is not None and buckets_ok:
        results.append(
            _result(
                "account comparison",
                buckets == expected_buckets,
                "Matches a direct ListBuckets call."
                if buckets == expected_buckets
                else f"Expected {expected_buckets}, got {buckets}",
            )
        )

    return results


class SmokeTestRunner:
    """Invokes the deployed Bucket Lister function and validates its response."""

    def __init__(self, config: Config, session: Optional[boto3.Session] = None):
        self.config = config
        self.session = session or boto3.Session(region_name=config.aws_region)

        self.lambda_client = self.session.client(
            "lambda",
            config=BotocoreConfig(
                read_timeout=config.timeout_seconds,
                connect_timeout=10,
                retries={"max_attempts": 0},
            ),
        )
        self.s3 = self.session.client("s3")
        self.console = Console()
        self.run_id = f"e2e-test-{uuid.uuid4().hex[:8]}"

    def _build_event(self) -> dict:
        return {
            "source": "bucket-lister.e2e",
            "run_id": self.run_id,
            "time": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        }

    def _invoke(self) -> Any:
        self.console.print("\n--- [bold blue]Direct Invocation[/bold blue] ---")
        start = time.monotonic()
        response = self.lambda_client.invoke(
            FunctionName=self.config.lambda_function_name,
            InvocationType="RequestResponse",
            Payload=json.dumps(self._build_event()).encode("utf-8"),
        )
        elapsed_ms = (time.monotonic() - start) * 1000
        raw_payload = response["Payload"].read()

        if response.get("FunctionError"):
            raise RuntimeError(
                f"Function raised an unhandled error ({response['FunctionError']}): "
                f"{raw_payload.decode('utf-8', errors='replace')}"
            )

        self.console.log(
            f"[green]✓[/green] Invocation completed in {elapsed_ms:.0f} ms "
            f"(status {response['StatusCode']})."
        )
        return json.loads(raw_payload)

    def _expected_buckets(self) -> Optional[List[str]]:
        if not self.config.compare_with_account:
            return None
        response = self.s3.list_buckets()
        return [bucket["Name"] for bucket in response.get("Buckets", [])]

    def _display_and_report(self, results: List[ValidationResult]):
        """Displays results to console and generates JUnit XML report if requested."""
        table = Table(title="Validation Results")
        table.add_column("Check", style="cyan", no_wrap=True)
        table.add_column("Status", justify="center")
        table.add_column("Details", style="yellow")

        for res in results:
            style = "green" if res["status"] == "PASS" else "red"
            table.add_row(
                res["check"], f"[{style}]{res['status']}[/{style}]", res["details"]
            )

        self.console.print(table)

        if self.config.report_file:
            self._generate_junit_report(results)
            self.console.print(
                f"JUnit XML report saved to: [bold blue]{self.config.report_file}[/bold blue]"
            )

    def _generate_junit_report(self, results: List[ValidationResult]):
        """Creates a JUnit XML file from the validation results."""
        failures = sum(1 for r in results if r["status"] == "FAIL")
        test_suite = ET.Element(
            "testsuite",
            name="BucketListerSmokeTest",
            tests=str(len(results)),
            failures=str(failures),
        )
        for res in results:
            test_case = ET.SubElement(
                test_suite, "testcase", name=res["check"], classname="E2EResponseValidation"
            )
            if res["status"] == "FAIL":
                failure = ET.SubElement(test_case, "failure", message=res["details"])
                failure.text = f"Check: {res['check']}\nDetails: {res['details']}"

        tree = ET.ElementTree(test_suite)
        ET.indent(tree, space="  ")
        tree.write(self.config.report_file, encoding="utf-8", xml_declaration=True)

    def run(self) -> int:
        """Executes the smoke test and returns a process exit code."""
        try:
            self.console.print(
                Panel(
                    f"[cyan bold]{self.config.description}[/cyan bold]\n\n"
                    f"Run ID: [bold blue]{self.run_id}[/bold blue]\n"
                    f"Function: {self.config.lambda_function_name}",
                    title="Test Case",
                    expand=False,
                )
            )

            payload = self._invoke()
            results = validate_response(payload, self._expected_buckets())
            self._display_and_report(results)

            return 0 if all(r["status"] == "PASS" for r in results) else 1

        except Exception as e:
            self.console.print(
                "\n[bold red]An unexpected error occurred during the test run.[/bold red]"
            )
            if self.config.verbose:
                self.console.print(
                    "\n[yellow]Verbose mode enabled. Full traceback:[/yellow]"
                )
                self.console.print_exception(show_locals=True)
            else:
                self.console.print(f"Error details: {e}")
                self.console.print(
                    "\n[dim]Run with the --verbose flag for a full traceback.[/dim]"
                )
            return 1
