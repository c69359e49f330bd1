"""Convert a literate VHDL snippet in 3 lines — zero config, zero deps."""

from lit2md import convert_string

source = """\
--] # A counter
--] Counts up on every rising edge.
process (clk) begin
  if rising_edge(clk) then count <= count + 1; end if;
end process;
"""

print(convert_string(source, "--", "vhdl"), end="")
