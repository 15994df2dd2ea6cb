import logging
import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

import awql
from awql.core.errors import ApiRejectedError, AwqlError

logging.basicConfig(level=logging.DEBUG)

dsn = input("Enter DSN (AccountId[:ApiVersion]|DeveloperToken|ClientId|ClientSecret|RefreshToken): ").strip()
if not dsn:
	print("No DSN entered; exiting.")
	sys.exit(1)

query = "SELECT CampaignId, CampaignName, Clicks FROM CAMPAIGN_PERFORMANCE_REPORT WHERE CampaignStatus = ? DURING LAST_7_DAYS"

try:
	with awql.connect(dsn) as conn:
		cur = conn.cursor()
		cur.execute(query, ["ENABLED"])
		print([d[0] for d in cur.description or []])
		for row in cur:
			print(row)

		# Same report as a DataFrame, through the low-level statement API
		df = conn.prepare(query).execute(["PAUSED"]).to_dataframe()
		print(df.head())
except ApiRejectedError as ex:
	print(f"Query rejected: {ex}")
except AwqlError as ex:
	print({"code": ex.code, "subcode": ex.subcode, "message": ex.message})
	sys.exit(1)
