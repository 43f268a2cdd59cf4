"""Basic instance selection example.

Requires: AWS credentials with ec2:DescribeInstanceTypes and
ec2:DescribeInstanceTypeOfferings permissions.
"""

from shapewright import EC2Provider, Filters, IntRange, Selector
from shapewright.outputs import table_output_wide

selector = Selector(EC2Provider(region="us-east-1"))

# At least 4 vCPUs, a GPU, available in one specific zone
filters = Filters(
    vcpus_range=IntRange(min=4),
    gpus_range=IntRange(min=1),
    availability_zone="use1-az1",
    max_results=10,
)

print("--- Instance types ---")
for name in selector.filter(filters):
    print(name)

print("\n--- Details ---")
for line in selector.filter_with_output(filters, table_output_wide):
    print(line)

# Graviton, bare metal, anywhere in the region
arm_metal = selector.filter(Filters(cpu_architecture="arm64", bare_metal=True, region="us-east-1"))
print(f"\n{len(arm_metal)} arm64 bare-metal instance types in us-east-1")
